"""
dpr_api

Read-mostly REST API over the DPR member table.
"""

__version__ = "1.0.0"
