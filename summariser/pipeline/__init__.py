"""Extraction → summarisation → translation pipeline."""

from summariser.pipeline.models import PipelineResult
from summariser.pipeline.orchestrator import SummaryPipeline, build_pipeline
from summariser.pipeline.summarizer import split_sentences, summarize
from summariser.pipeline.translator import URDU_TABLE, build_table, load_table, translate

__all__ = [
    "PipelineResult",
    "SummaryPipeline",
    "build_pipeline",
    "summarize",
    "split_sentences",
    "translate",
    "build_table",
    "load_table",
    "URDU_TABLE",
]
