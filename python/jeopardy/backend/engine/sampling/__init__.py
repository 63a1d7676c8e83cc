from jeopardy.backend.engine.sampling.sampler import sample

__all__ = ["sample"]
