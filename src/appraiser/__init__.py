"""
CD Price Appraiser

Modules:
- collection: Read the CD collection CSV
- release_resolver: Resolve descriptions to Discogs releases
- price_extractor: Scrape sale price statistics from release pages
- pipeline: Per-CD appraisal and the rate-limited batch run
- cache: JSON snapshot of batch results
- report: Ranked price report and CSV export
- common: Shared utilities
"""

__version__ = "0.1.0"
