"""
Analysis package public API.

Re-exports:
    take_sample
    Strategy, analyze, SampleProfile, profile_sample
"""

from .engine import SampleProfile, Strategy, analyze, profile_sample
from .sampler import take_sample

__all__ = ["take_sample", "Strategy", "analyze", "SampleProfile", "profile_sample"]
