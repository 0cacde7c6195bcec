"""Composition: entry points for functions and step pipelines."""

from resultant.compose.flow import flow, result, task

__all__ = ['flow', 'result', 'task']
