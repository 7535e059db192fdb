#!/usr/bin/env python3
"""
featuregate - Feature-flag preprocessor for source trees

Builds a feature-gated copy of a source tree. Lines wrapped in comment
directives are kept or dropped depending on the enabled features:

    // #if FEATURE_CHAT
    import { chat } from "./chat.js";
    // #else
    const chat = null;
    // #endif

Supported comment styles:
    # #if NAME      // #if NAME      /* #if NAME */      <!-- #if NAME -->

Files ending in .js .ts .jsx .py .txt .html .css are preprocessed; all other
files are copied unchanged. The output directory is removed and recreated on
every build.

Usage:
    featuregate <sourceDir> <outDir> <FEATURE1,FEATURE2,...>

Examples:
    # Build with two features enabled
    featuregate project dist FEATURE_CHAT,FEATURE_AUTH

    # Build with no features and trace every file
    featuregate project dist "" -vv
"""

import shutil
import sys
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from typing import List, NoReturn, Optional

from .lib import tree_copy, skipList_load, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline, DirectiveError, SourceDecodeError
from .config import appsettings


USAGE_EXAMPLE = """
Example:
  featuregate project dist FEATURE_CHAT,FEATURE_AUTH
"""


class FeaturegateArgumentParser(ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors"""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n{USAGE_EXAMPLE}")


# Define CLI arguments
parser = FeaturegateArgumentParser(
    prog="featuregate",
    description="featuregate - strip or keep lines of a source tree based on feature-flag directives",
    epilog=USAGE_EXAMPLE,
    formatter_class=RawDescriptionHelpFormatter,
)

parser.add_argument("sourcedir", type=str, help="Source directory to preprocess")

parser.add_argument("outdir", type=str, help="Output directory (removed and recreated)")

parser.add_argument(
    "featureArg",
    metavar="features",
    type=str,
    help="Comma-separated list of enabled features, e.g. FEATURE_A,FEATURE_B",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate that the source directory exists and is not inside the
    output directory (which is removed before the build).

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with envOK set

    Exits:
        1 if the source directory is missing or would be removed
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    if not state.sourcedir.is_dir():
        print(
            f'Source directory "{state.sourcedir}" not found.\n\n'
            "Please provide a valid source directory.",
            file=sys.stderr,
        )
        state.envOK = False
        sys.exit(1)

    if state.outdir == state.sourcedir or state.outdir in state.sourcedir.parents:
        print(
            f'Output directory "{state.outdir}" would remove the source directory.',
            file=sys.stderr,
        )
        state.envOK = False
        sys.exit(1)

    LOG(f"Source directory: {state.sourcedir}", level=2)
    LOG(f"Output directory: {state.outdir}", level=2)

    state.envOK = True
    return state


def features_split(featureArg: str) -> List[str]:
    """
    Split a comma-separated feature argument

    Names are trimmed and empty entries dropped:
        " A, ,B " -> ["A", "B"]
    """
    return [name.strip() for name in featureArg.split(",") if name.strip()]


def features_parse(inputstate: ProgramState) -> ProgramState:
    """Parse the enabled feature names from the command line argument"""
    state = inputstate.copy()
    state.features = features_split(state.featureArg)
    LOG(f"Enabled features: {state.features}", level=2)
    return state


def skipList_resolve(inputstate: ProgramState) -> ProgramState:
    """
    Resolve the names to leave out of the output tree.

    Combines the configured default skip list with the entries of the
    skip-list file at the source root.
    """
    state = inputstate.copy()
    state.skipNames = skipList_load(
        state.sourcedir, appsettings.ignore_filename, appsettings.default_skip
    )
    LOG(f"Skip list: {state.skipNames}", level=2)
    return state


def tree_build(inputstate: ProgramState) -> ProgramState:
    """
    Recreate the output directory and copy the preprocessed tree into it.

    Args:
        inputstate: Program state with features and skipNames resolved

    Returns:
        ProgramState with added field:
            - buildResult: BuildResult of the copy

    Exits:
        1 on a directive error in any file (the build stops at the first one)
        or on a filesystem or decoding error
    """
    state = inputstate.copy()

    LOG("Building output tree...", level=1)

    try:
        if state.outdir.exists():
            shutil.rmtree(state.outdir)
        state.outdir.mkdir(parents=True, exist_ok=True)
        state.buildResult = tree_copy(
            state.sourcedir,
            state.outdir,
            features=state.features,
            skip_names=state.skipNames,
            extensions=appsettings.extensions,
            encoding=appsettings.encoding,
        )
    except DirectiveError as e:
        print(f"Preprocess error in {e.path}: {e}", file=sys.stderr)
        sys.exit(1)
    except SourceDecodeError as e:
        print(f"Build error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Build error: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display build results to user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if buildResult is None
    """
    state: ProgramState = inputstate.copy()
    if state.buildResult is None:
        print("Error: Build failed", file=sys.stderr)
        sys.exit(1)

    result = state.buildResult
    LOG(f'Built from "{state.sourcedir}" → "{state.outdir}" with features: {state.features}', level=1)
    LOG(f"  Preprocessed: {len(result.processed)} files", level=1)
    LOG(f"  Copied:       {len(result.copied)} files", level=1)
    LOG(f"  Skipped:      {len(result.skipped)} entries", level=2)
    return state


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point - build a feature-gated copy of a source tree.

    Orchestrates the build pipeline:
        1. env_check: Validate the source directory
        2. features_parse: Split the feature argument
        3. skipList_resolve: Load the skip list
        4. tree_build: Recreate the output tree with preprocessed files
        5. results_report: Display results to user

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
    """
    options: Namespace = parser.parse_args(argv)

    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, features_parse, skipList_resolve, tree_build, results_report)


if __name__ == "__main__":
    main()
