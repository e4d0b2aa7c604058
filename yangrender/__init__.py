"""The yangrender library for rendering YANG schemas in several formats"""

__version__ = '0.3.0'
__date__ = '2026-10-19'
