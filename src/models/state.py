"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from pathlib import Path
from argparse import Namespace
from functools import reduce
from typing import Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field

from .walker import BuildResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the build pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the build progresses.

    Pipeline stages and their state additions:
        - Initial: sourcedir, outdir, featureArg, verbosity
        - env_check: envOK
        - features_parse: features
        - skipList_resolve: skipNames
        - tree_build: buildResult
        - results_report: (no additions, terminal stage)

    Attributes:
        sourcedir: Root of the source tree to preprocess
        outdir: Root of the output tree (removed and recreated)
        featureArg: Raw comma-separated feature list from the command line
        verbosity: Logging verbosity level (1-3)
        envOK: Environment validation passed
        features: Enabled feature names parsed from featureArg
        skipNames: Entry names left out of the output tree
        buildResult: Summary of the tree copy
    """

    # CLI arguments
    sourcedir: Path = field(default=Path("."))
    outdir: Path = field(default=Path("dist"))
    featureArg: str = field(default="")
    verbosity: int = field(default=1)

    # Pipeline state
    envOK: bool = field(default=False)
    features: List[str] = field(default_factory=list)
    skipNames: List[str] = field(default_factory=list)
    buildResult: Optional[BuildResult] = field(default=None)

    @classmethod
    def state_createFromNamespace(cls: Type[PS], options: Namespace) -> PS:
        """
        Create ProgramState from an argparse Namespace.

        Only attributes that name a ProgramState field are taken over; the
        source and output directories are resolved against the current
        working directory.

        Args:
            options: Parsed CLI arguments (sourcedir, outdir, featureArg, ...)

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        for key in ("sourcedir", "outdir"):
            if key in filtered_options:
                filtered_options[key] = Path(filtered_options[key]).resolve()

        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            features_parse,
            tree_build,
            results_report
        )

    This is equivalent to:
        results_report(tree_build(features_parse(env_check(initial_state))))

    But reads left-to-right instead of inside-out.
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
