from .orchestrator import ReviewPipeline

__all__ = ["ReviewPipeline"]
