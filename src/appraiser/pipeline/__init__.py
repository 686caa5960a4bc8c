"""Pipeline Module - per-CD appraisal and the rate-limited batch run."""

from .appraiser import CdAppraiser
from .batch import BatchRunner

__all__ = ["BatchRunner", "CdAppraiser"]
