"""Exception types raised by the pipeline."""


class MiniEtlError(Exception):
    """Base class for mini-etl errors."""


class RetrievalFailure(MiniEtlError):
    """Live source returned something that is not a usable batch of user records.

    Raised by connectors; the loader recovers from it by substituting fallback data.
    """


class PipelineRunError(MiniEtlError):
    """A triggered run could not complete (distinct from a run that used fallback data)."""
