"""Fusion of local and external signals into a credibility report."""

from credibility_system.scoring.fusion_engine import (
    RELIABILITY_BANDS,
    FusionEngine,
    reliability_label,
)

__all__ = ["FusionEngine", "RELIABILITY_BANDS", "reliability_label"]
