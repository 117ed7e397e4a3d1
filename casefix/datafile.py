"""
Data file handling for Casefix.

This module provides functionality for loading and saving conversion
settings in the .casefix.txt file, which is split into # SECTION blocks.
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Union

if TYPE_CHECKING:
    from .context import CasefixContext


# Data file constants
DATA_FILE_NAME = ".casefix.txt"
STYLE_SECTION_MARKER = "# STYLE"
SCOPE_SECTION_MARKER = "# SCOPE"
OPTIONS_SECTION_MARKER = "# OPTIONS"
STOP_WORDS_SECTION_MARKER = "# STOP_WORDS"
CHAR_TYPES_SECTION_MARKER = "# CHAR_TYPES"
DEFAULT_DIR_SECTION_MARKER = "# DEFAULT_FILE_DIR"

SECTION_NAMES = {
    STYLE_SECTION_MARKER: 'style',
    SCOPE_SECTION_MARKER: 'scope',
    OPTIONS_SECTION_MARKER: 'options',
    STOP_WORDS_SECTION_MARKER: 'stop_words',
    CHAR_TYPES_SECTION_MARKER: 'char_types',
    DEFAULT_DIR_SECTION_MARKER: 'default_dir',
}

# List of all section markers to help identify the end of a section's content
ALL_SECTION_MARKERS = set(SECTION_NAMES)

# Options that are set through their own sections
SECTION_OPTIONS = {'style', 'scope', 'stop_words', 'char_types', 'selected_lines'}

PathLike = Union[str, Path]


def default_data_file_path() -> str:
    """The data file next to the casefix package directory."""
    script_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.join(os.path.dirname(script_dir), DATA_FILE_NAME)


def _clean(line: str) -> str:
    # strip out any leading BOM / ZERO-WIDTH chars
    return line.strip().lstrip('﻿​ ')


def load_data_file(ctx: 'CasefixContext' = None, path: Optional[PathLike] = None) -> 'CasefixContext':
    """
    Loads the conversion settings and default directory by parsing the
    data file based on # SECTION markers.

    Args:
        ctx: Optional CasefixContext to populate, creates new one if None
        path: Data file to read, defaults to .casefix.txt beside the package

    Returns:
        CasefixContext populated with data from the file
    """
    from .context import CasefixContext
    from .logging import log_message
    from .options import ConversionOptions, option_names

    if ctx is None:
        ctx = CasefixContext()

    ctx.options = ConversionOptions()
    ctx.default_file_directory = None

    data_file_path = str(path) if path else default_data_file_path()
    log_message(f"Attempting to load data file: {data_file_path}")

    if not os.path.exists(data_file_path):
        log_message(f"Data file '{data_file_path}' not found. Using default settings.", level="WARNING")
        return ctx

    settings: Dict[str, Any] = {}
    stop_words: List[str] = []
    char_types: List[str] = []
    known_options = set(option_names()) - SECTION_OPTIONS

    try:
        with open(data_file_path, 'r', encoding='utf-8') as f:
            lines = f.readlines()

        current_section = None
        for i, line in enumerate(lines):
            stripped_line = _clean(line)

            if stripped_line in ALL_SECTION_MARKERS:
                current_section = SECTION_NAMES[stripped_line]
                log_message(f"Found section marker: {stripped_line}", level="DEBUG")
                continue

            if not current_section or not stripped_line or stripped_line.startswith('#'):
                continue

            if current_section == 'style':
                settings['style'] = stripped_line
            elif current_section == 'scope':
                settings['scope'] = stripped_line
            elif current_section == 'options':
                name, sep, value = stripped_line.partition('=')
                name = name.strip()
                if not sep or name not in known_options:
                    log_message(f"Skipping malformed option line {i + 1}: '{stripped_line}'", level="WARNING")
                    continue
                settings[name] = value.strip()
            elif current_section == 'stop_words':
                stop_words.append(stripped_line)
            elif current_section == 'char_types':
                char_types.append(stripped_line)
            elif current_section == 'default_dir':
                if ctx.default_file_directory is None:
                    potential_path = Path(stripped_line).expanduser()
                    if potential_path.is_dir():
                        ctx.default_file_directory = potential_path
                    else:
                        log_message(f"Invalid default directory path in file: '{stripped_line}'", level="WARNING")

        settings['stop_words'] = stop_words
        settings['char_types'] = char_types
        ctx.options = ConversionOptions.from_dict(settings)

        log_message(f"Loaded settings: style={ctx.options.style.value if ctx.options.style else None}, "
                    f"scope={ctx.options.scope.value}, {len(ctx.options.stop_words)} stop words.")

    except (OSError, ValueError) as e:
        log_message(f"Error loading data file '{data_file_path}': {e}. Using default settings.", level="ERROR")
        ctx.options = ConversionOptions()
        ctx.default_file_directory = None

    return ctx


def _write_section(marker: str, content_lines: Iterable[str], path: Optional[PathLike] = None):
    """Replace one section's content in the data file, creating it if missing."""
    from .logging import log_message

    data_file_path = str(path) if path else default_data_file_path()
    new_content = [entry + '\n' for entry in content_lines]

    original_lines: List[str] = []
    if os.path.exists(data_file_path):
        try:
            with open(data_file_path, 'r', encoding='utf-8') as f:
                original_lines = f.readlines()
        except OSError as e:
            log_message(f"Could not read existing data file '{data_file_path}': {e}. "
                        f"Overwriting only the {marker} section.", level="WARNING")
            original_lines = []

    new_lines: List[str] = []
    handled = False
    i = 0
    while i < len(original_lines):
        line = original_lines[i]
        new_lines.append(line)
        i += 1
        if _clean(line) == marker and not handled:
            new_lines.extend(new_content)
            # Skip the old content up to the next section marker
            while i < len(original_lines) and _clean(original_lines[i]) not in ALL_SECTION_MARKERS:
                i += 1
            handled = True

    if not handled:
        if new_lines and not new_lines[-1].endswith('\n'):
            new_lines[-1] += '\n'
        if new_lines and new_lines[-1].strip() != '':
            new_lines.append('\n')
        new_lines.append(marker + '\n')
        new_lines.extend(new_content)

    try:
        Path(data_file_path).parent.mkdir(parents=True, exist_ok=True)
        with open(data_file_path, 'w', encoding='utf-8') as f:
            f.writelines(new_lines)
        log_message(f"Data file '{data_file_path}' updated ({marker} section).")
    except OSError as e:
        log_message(f"Error saving {marker} section to '{data_file_path}': {e}", level="ERROR")


def save_stop_words(words: Iterable[str], path: Optional[PathLike] = None):
    """Saves the stop words to the # STOP_WORDS section."""
    _write_section(STOP_WORDS_SECTION_MARKER, sorted(set(words)), path)


def save_default_directory_to_data_file(directory_path: PathLike, path: Optional[PathLike] = None):
    """Saves the given directory path to the # DEFAULT_FILE_DIR section."""
    _write_section(DEFAULT_DIR_SECTION_MARKER, [str(directory_path)], path)
