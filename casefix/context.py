"""
Context and state management for Casefix.

This module contains the CasefixContext dataclass and related types
that carry the text and settings through the processing pipeline.
"""

import datetime
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any, Callable

from .options import ConversionOptions


@dataclass
class FormatOptions:
    """Flags for the remove-formatting tool, applied in field order."""
    trim: bool = False
    trim_lines: bool = False
    remove_whitespace: bool = False
    strip_html: bool = False
    strip_extra_spaces: bool = False
    strip_empty_lines: bool = False
    strip_tabs: bool = False
    remove_non_alphanumeric: bool = False
    remove_emojis: bool = False
    remove_punctuation: bool = False


@dataclass
class CasefixContext:
    """Central state object passed between processing steps."""
    text: str = ""
    filepath: Optional[str] = None

    # Configuration data
    options: ConversionOptions = field(default_factory=ConversionOptions)
    default_file_directory: Optional[Path] = None

    # Text tool inputs
    chars_to_remove: str = ""
    find_text: str = ""
    replace_text: str = ""
    format_options: FormatOptions = field(default_factory=FormatOptions)

    # Processing state
    processing_log: List[Dict[str, Any]] = field(default_factory=list)
    changes_made: List[str] = field(default_factory=list)

    def log_change(self, step: str, description: str, before_length: int = None, after_length: int = None):
        """Log a processing step change."""
        self.processing_log.append({
            'step': step,
            'description': description,
            'before_length': len(self.text) if before_length is None else before_length,
            'after_length': len(self.text) if after_length is None else after_length,
            'timestamp': datetime.datetime.now()
        })
        self.changes_made.append(f"{step}: {description}")

    def get_processing_summary(self) -> str:
        """Get a summary of all processing steps performed."""
        if not self.processing_log:
            return "No processing steps completed."

        summary = "Processing Summary:\n"
        for i, log_entry in enumerate(self.processing_log, 1):
            summary += f"{i}. {log_entry['step']}: {log_entry['description']}\n"
        return summary


@dataclass
class ProcessingStep:
    """Represents a single processing step in the pipeline."""
    name: str
    processor: Callable[[CasefixContext], CasefixContext]
    description: str
    enabled: bool = True
