"""Changelog generation module."""

from .assembler import ChangelogAssembler, boundary_pairs
from .builder import SectionBuilder
from .exceptions import RenderError
from .models import Changelog, OutputFormat, PullRequest, PullRequestUser, Section
from .renderer import render

__all__ = [
    "OutputFormat",
    "PullRequestUser",
    "PullRequest",
    "Section",
    "Changelog",
    "SectionBuilder",
    "ChangelogAssembler",
    "boundary_pairs",
    "RenderError",
    "render",
]
