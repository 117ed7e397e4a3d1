"""
Processing pipeline orchestration for Casefix.

This module provides functionality to create and run processing pipelines,
coordinating the cleanup tools and the case conversion engine.
"""

from typing import TYPE_CHECKING, Any, List, Dict, Callable, Optional

if TYPE_CHECKING:
    from .context import CasefixContext, ProcessingStep


def create_processing_pipeline() -> List['ProcessingStep']:
    """
    Create the standard processing pipeline in the correct logical order.

    PROCESSING ORDER:
    1. remove_formatting       - Trim, strip HTML/tabs/spaces/emoji/punctuation
    2. remove_blank_lines      - Remove empty lines and whitespace-only lines
    3. remove_duplicate_lines  - Keep the first occurrence of each line
    4. remove_underscores      - Replace underscores with spaces
    5. remove_characters       - Delete user-listed characters
    6. find_replace            - Literal find and replace
    7. case_conversion         - Rule-driven case conversion

    Cleanup runs before conversion so that line numbers, sentence
    boundaries and identifier markers are evaluated on the final text.
    """
    from .context import ProcessingStep
    from .processors.formatting import remove_formatting
    from .processors.cleanup import (
        remove_blank_lines, remove_duplicate_lines, remove_underscores, remove_characters, find_replace,
    )
    from .processors.conversion import apply_case_conversion

    return [
        ProcessingStep(
            name='remove_formatting',
            processor=remove_formatting,
            description='Remove text formatting',
            enabled=False
        ),
        ProcessingStep(
            name='remove_blank_lines',
            processor=remove_blank_lines,
            description='Remove blank lines',
            enabled=False
        ),
        ProcessingStep(
            name='remove_duplicate_lines',
            processor=remove_duplicate_lines,
            description='Remove duplicate lines',
            enabled=False
        ),
        ProcessingStep(
            name='remove_underscores',
            processor=remove_underscores,
            description='Replace underscores with spaces',
            enabled=False
        ),
        ProcessingStep(
            name='remove_characters',
            processor=remove_characters,
            description='Remove listed characters',
            enabled=False
        ),
        ProcessingStep(
            name='find_replace',
            processor=find_replace,
            description='Find and replace',
            enabled=False
        ),
        ProcessingStep(
            name='case_conversion',
            processor=apply_case_conversion,
            description='Convert case',
        ),
    ]


def run_processing(ctx: 'CasefixContext', enabled_steps: Dict[str, bool],
                   progress_callback: Optional[Callable[[int, int, str], None]] = None,
                   status_callback: Optional[Callable[[str], None]] = None) -> 'CasefixContext':
    """
    Run the enabled pipeline steps in order.

    Args:
        ctx: CasefixContext to process
        enabled_steps: Dictionary mapping step names to enabled status
        progress_callback: Optional callback for progress updates (current, total, description)
        status_callback: Optional callback for status messages

    Returns:
        Updated CasefixContext after processing
    """
    from .logging import log_message

    log_message("Starting run_processing.")
    pipeline = create_processing_pipeline()
    enabled_steps = validate_enabled_steps(enabled_steps)

    for i, step in enumerate(pipeline):
        if not enabled_steps.get(step.name, False):
            continue
        log_message(f"Starting {step.description}...")
        if status_callback:
            status_callback(f"Step {i + 1}/{len(pipeline)}: {step.description}")
        ctx = step.processor(ctx)
        if progress_callback:
            progress_callback(i + 1, len(pipeline), step.description)

    log_message(ctx.get_processing_summary())
    log_message("run_processing complete.")
    return ctx


def get_available_processors() -> List[Dict[str, Any]]:
    """
    Get list of available processors with their metadata.

    Returns:
        List of processor dictionaries with name, description and default state
    """
    return [
        {
            'name': step.name,
            'description': step.description,
            'enabled': step.enabled
        }
        for step in create_processing_pipeline()
    ]


def validate_enabled_steps(enabled_steps: Dict[str, bool]) -> Dict[str, bool]:
    """
    Validate and sanitize enabled steps dictionary.

    Args:
        enabled_steps: Dictionary mapping step names to enabled status

    Returns:
        Validated dictionary with only valid step names
    """
    from .logging import log_message

    valid_step_names = {step.name for step in create_processing_pipeline()}
    unknown = set(enabled_steps) - valid_step_names
    if unknown:
        log_message(f"Ignoring unknown pipeline steps: {sorted(unknown)}", level="WARNING")

    return {
        name: enabled
        for name, enabled in enabled_steps.items()
        if name in valid_step_names
    }
