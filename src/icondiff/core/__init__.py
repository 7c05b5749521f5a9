"""Core comparison engine for icondiff.

This module contains the algorithms for:

- Sampling stops along each variation axis
- Generating the constellation of design-space locations
- Reconciling icon and location sets of two fonts
- Judging renderings equivalent (structural outlines, exact rasters)
- Persisting failure artifacts
- Orchestrating a full diff run

The sampling, reconciliation and comparison functions are:
- Pure (no side effects)
- Safe for use in worker processes

Key functions:
- stops: Representative coordinates of one axis
- constellation: Canonical locations of a font's design space
- reconcile: Partition two sets into left-only, right-only and common
- equivalent_outlines: Rotation-tolerant structural outline comparison
- equivalent_rasters: Exact pixel buffer comparison

Key classes:
- FailureArtifactWriter: Writes both sides of a mismatch to an ArtifactSink
- DiffDriver: Plans and executes a diff of two fonts
"""

from icondiff.core.artifacts import (
    ArtifactSink,
    DirectorySink,
    FailureArtifactWriter,
    MemorySink,
)
from icondiff.core.compare import (
    equivalent_outlines,
    equivalent_rasters,
    equivalent_subpaths,
    extract_path,
)
from icondiff.core.constellation import constellation, ordered, raw_constellation
from icondiff.core.driver import (
    DiffDriver,
    DiffPlan,
    DiffReport,
    IconOutcome,
    IconTask,
    Mismatch,
    compare_icon,
)
from icondiff.core.reconcile import (
    Reconciliation,
    reconcile,
    reconcile_icons,
    reconcile_locations,
)
from icondiff.core.sampler import STEP_POLICY, stops

__all__ = [
    "STEP_POLICY",
    # Artifacts
    "ArtifactSink",
    # Driver
    "DiffDriver",
    "DiffPlan",
    "DiffReport",
    "DirectorySink",
    "FailureArtifactWriter",
    "IconOutcome",
    "IconTask",
    "MemorySink",
    "Mismatch",
    # Reconciliation
    "Reconciliation",
    "compare_icon",
    # Sampling
    "constellation",
    # Comparison
    "equivalent_outlines",
    "equivalent_rasters",
    "equivalent_subpaths",
    "extract_path",
    "ordered",
    "raw_constellation",
    "reconcile",
    "reconcile_icons",
    "reconcile_locations",
    "stops",
]
