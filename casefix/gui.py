"""
PyQt5 GUI interface for Casefix.

This module provides the desktop front-end: an input pane, a live output
pane converted on every change, the option panels, the text tools and a
live analytics panel. All text logic lives in the engine, processors and
analytics modules; the window only collects settings and displays results.
"""

import sys
import os
from pathlib import Path
from typing import Dict, Optional

from PyQt5.QtWidgets import (
    QApplication, QMainWindow, QVBoxLayout, QHBoxLayout, QWidget,
    QPushButton, QTextEdit, QLabel, QCheckBox, QProgressBar,
    QFileDialog, QMessageBox, QGroupBox, QGridLayout, QSplitter,
    QButtonGroup, QRadioButton, QSpinBox, QComboBox, QLineEdit, QTabWidget
)
from PyQt5.QtCore import Qt, QThread, pyqtSignal
from PyQt5.QtGui import QFont

from .analytics import analyze_text, find_duplicate_words, format_word_frequency, word_frequency
from .context import CasefixContext, FormatOptions
from .datafile import load_data_file, save_default_directory_to_data_file, save_stop_words
from .engine import convert_text, parse_line_selection
from .engine.scope import count_lines
from .logging import log_message
from .options import CaseStyle, CharType, Scope, parse_stop_words
from .pipeline import run_processing, get_available_processors
from .processors.quickcase import QUICK_CASES, apply_quick_case


SKIP_OPTIONS = [
    ('skip_first_word', "First word"),
    ('skip_last_word', "Last word"),
    ('skip_first_sentence', "First sentence"),
    ('skip_last_sentence', "Last sentence"),
    ('skip_all_caps', "ALL CAPS words"),
    ('skip_lowercase', "lowercase words"),
    ('skip_mixed_case', "MiXeD case words"),
    ('skip_numbers', "Words with numbers"),
    ('skip_symbols', "Words with symbols"),
]

CONVERT_ONLY_OPTIONS = [
    ('convert_only_all_caps', "ALL CAPS words"),
    ('convert_only_lowercase', "lowercase words"),
    ('convert_only_mixed_case', "MiXeD case words"),
    ('convert_only_numbers', "Words with numbers"),
]

APPLY_OPTIONS = [
    ('apply_numbers', "Words with numbers"),
    ('apply_symbols', "Words with symbols"),
    ('apply_accented', "Accented words"),
    ('apply_emoji', "Emoji / non-Latin words"),
]

IGNORE_OPTIONS = [
    ('ignore_quotes', "Quotes"),
    ('ignore_parentheses', "(Parentheses)"),
    ('ignore_brackets', "[Brackets]"),
    ('ignore_braces', "{Braces}"),
    ('ignore_html', "<HTML tags>"),
    ('ignore_markdown', "`Markdown code`"),
]

COUNT_OPTIONS = [
    ('skip_first_n_words', "Skip first N words"),
    ('skip_last_n_words', "Skip last N words"),
    ('skip_first_n_sentences', "Skip first N sentences"),
    ('skip_last_n_sentences', "Skip last N sentences"),
    ('skip_shorter_than', "Skip words shorter than"),
    ('skip_longer_than', "Skip words longer than"),
]

FORMAT_LABELS = {
    'trim': "Trim text",
    'trim_lines': "Trim each line",
    'remove_whitespace': "Remove all whitespace",
    'strip_html': "Strip HTML",
    'strip_extra_spaces': "Collapse extra spaces",
    'strip_empty_lines': "Strip empty lines",
    'strip_tabs': "Strip tabs",
    'remove_non_alphanumeric': "Remove non-alphanumeric",
    'remove_emojis': "Remove emojis",
    'remove_punctuation': "Remove punctuation",
}

ERROR_STYLE = "color: #CC0000;"


class ProcessingThread(QThread):
    """Thread for running the text tool pipeline."""

    progress_updated = pyqtSignal(int, int, str)  # current, total, description
    status_updated = pyqtSignal(str)
    processing_complete = pyqtSignal()
    error_occurred = pyqtSignal(str)

    def __init__(self, ctx: CasefixContext, enabled_steps: Dict[str, bool]):
        super().__init__()
        self.ctx = ctx
        self.enabled_steps = enabled_steps

    def run(self):
        """Run the processing pipeline in a separate thread."""
        try:
            log_message("Starting processing thread")

            def progress_callback(current: int, total: int, description: str):
                self.progress_updated.emit(current, total, description)

            def status_callback(status: str):
                self.status_updated.emit(status)

            self.ctx = run_processing(
                self.ctx,
                self.enabled_steps,
                progress_callback=progress_callback,
                status_callback=status_callback
            )

            self.processing_complete.emit()
            log_message("Processing thread completed")

        except Exception as e:
            error_msg = f"Processing error: {str(e)}"
            log_message(error_msg, level="ERROR")
            self.error_occurred.emit(error_msg)


class CasefixMainWindow(QMainWindow):
    """Main application window for Casefix."""

    def __init__(self, data_file: Optional[str] = None):
        super().__init__()
        self.ctx = CasefixContext()
        self.data_file = data_file
        self.processing_thread: Optional[ProcessingThread] = None

        # Option widgets keyed by ConversionOptions field name
        self.option_checkboxes: Dict[str, QCheckBox] = {}
        self.option_spinboxes: Dict[str, QSpinBox] = {}
        self.char_type_checkboxes: Dict[CharType, QCheckBox] = {}
        self.tool_checkboxes: Dict[str, QCheckBox] = {}
        self.format_checkboxes: Dict[str, QCheckBox] = {}
        self.analytics_labels: Dict[str, QLabel] = {}

        self.init_ui()
        self.load_configuration()

    def init_ui(self):
        """Initialize the user interface."""
        self.setWindowTitle("Casefix - Text Case Converter")
        self.setGeometry(100, 100, 1300, 850)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QVBoxLayout()
        central_widget.setLayout(main_layout)

        main_layout.addWidget(self.create_file_section())
        main_layout.addWidget(self.create_style_section())

        content_splitter = QSplitter(Qt.Horizontal)
        content_splitter.addWidget(self.create_text_section())
        content_splitter.addWidget(self.create_side_panel())
        content_splitter.setSizes([850, 450])
        main_layout.addWidget(content_splitter, 1)

        main_layout.addWidget(self.create_status_section())

        self.apply_styles()

    def create_file_section(self) -> QGroupBox:
        """Create the file open/save section."""
        group = QGroupBox("File")
        layout = QHBoxLayout()

        self.file_label = QLabel("No file loaded")
        self.file_label.setStyleSheet("font-weight: bold;")

        self.open_button = QPushButton("Open...")
        self.open_button.clicked.connect(self.browse_file)

        self.save_button = QPushButton("Save Output...")
        self.save_button.clicked.connect(self.save_output)

        self.default_dir_button = QPushButton("Set Default Folder...")
        self.default_dir_button.clicked.connect(self.choose_default_directory)

        layout.addWidget(QLabel("File:"))
        layout.addWidget(self.file_label, 1)
        layout.addWidget(self.open_button)
        layout.addWidget(self.save_button)
        layout.addWidget(self.default_dir_button)

        group.setLayout(layout)
        return group

    def create_style_section(self) -> QGroupBox:
        """Create the style and scope controls."""
        group = QGroupBox("Conversion")
        layout = QGridLayout()

        self.style_combo = QComboBox()
        self.style_combo.addItem("(none)", None)
        for style in CaseStyle:
            self.style_combo.addItem(style.value, style)
        self.style_combo.currentIndexChanged.connect(self.on_style_changed)
        layout.addWidget(QLabel("Style:"), 0, 0)
        layout.addWidget(self.style_combo, 0, 1)

        self.scope_group = QButtonGroup(self)
        self.scope_buttons: Dict[Scope, QRadioButton] = {}
        scope_layout = QHBoxLayout()
        for i, (scope, label) in enumerate([(Scope.ENTIRE, "Entire text"),
                                            (Scope.IDENTIFIERS, "Between $$$START$$$ / $$$END$$$"),
                                            (Scope.LINES, "Selected lines")]):
            button = QRadioButton(label)
            self.scope_group.addButton(button, i)
            self.scope_buttons[scope] = button
            scope_layout.addWidget(button)
        self.scope_buttons[Scope.ENTIRE].setChecked(True)
        self.scope_group.buttonClicked.connect(self.on_scope_changed)
        layout.addWidget(QLabel("Scope:"), 0, 2)
        layout.addLayout(scope_layout, 0, 3)

        self.line_selection_edit = QLineEdit()
        self.line_selection_edit.setPlaceholderText("e.g. 1,3-4 (empty = all lines)")
        self.line_selection_edit.textChanged.connect(self.on_line_selection_changed)
        self.line_prefix_edit = QLineEdit()
        self.line_prefix_edit.setPlaceholderText("Lines starting with...")
        self.line_prefix_edit.textChanged.connect(
            lambda text: self.set_option('line_prefix', text))
        self.line_keyword_edit = QLineEdit()
        self.line_keyword_edit.setPlaceholderText("Lines containing...")
        self.line_keyword_edit.textChanged.connect(
            lambda text: self.set_option('line_keyword', text))

        layout.addWidget(QLabel("Lines:"), 1, 0)
        layout.addWidget(self.line_selection_edit, 1, 1)
        layout.addWidget(self.line_prefix_edit, 1, 2)
        layout.addWidget(self.line_keyword_edit, 1, 3)

        self.line_error_label = QLabel("")
        self.line_error_label.setStyleSheet(ERROR_STYLE)
        layout.addWidget(self.line_error_label, 2, 1, 1, 3)

        group.setLayout(layout)
        return group

    def create_text_section(self) -> QWidget:
        """Create the input and output panes."""
        widget = QWidget()
        layout = QVBoxLayout()

        layout.addWidget(QLabel("Input:"))
        self.input_edit = QTextEdit()
        self.input_edit.setFont(QFont("Courier New", 10))
        self.input_edit.setAcceptRichText(False)
        self.input_edit.textChanged.connect(self.on_input_changed)
        layout.addWidget(self.input_edit)

        quick_layout = QHBoxLayout()
        quick_layout.addWidget(QLabel("Quick case:"))
        for mode in QUICK_CASES:
            button = QPushButton(mode.capitalize())
            button.clicked.connect(lambda checked, m=mode: self.quick_case(m))
            quick_layout.addWidget(button)
        quick_layout.addStretch()
        layout.addLayout(quick_layout)

        layout.addWidget(QLabel("Output:"))
        self.output_edit = QTextEdit()
        self.output_edit.setFont(QFont("Courier New", 10))
        self.output_edit.setReadOnly(True)
        layout.addWidget(self.output_edit)

        report_layout = QHBoxLayout()
        self.copy_button = QPushButton("Copy Output")
        self.copy_button.clicked.connect(self.copy_output)
        self.use_output_button = QPushButton("Use Output as Input")
        self.use_output_button.clicked.connect(self.use_output_as_input)
        self.duplicates_button = QPushButton("Find Duplicate Words")
        self.duplicates_button.clicked.connect(self.show_duplicate_words)
        self.frequency_button = QPushButton("Word Frequency")
        self.frequency_button.clicked.connect(self.show_word_frequency)
        report_layout.addWidget(self.copy_button)
        report_layout.addWidget(self.use_output_button)
        report_layout.addStretch()
        report_layout.addWidget(self.duplicates_button)
        report_layout.addWidget(self.frequency_button)
        layout.addLayout(report_layout)

        widget.setLayout(layout)
        return widget

    def create_side_panel(self) -> QTabWidget:
        tabs = QTabWidget()
        tabs.addTab(self.create_options_tab(), "Options")
        tabs.addTab(self.create_tools_tab(), "Tools")
        tabs.addTab(self.create_analytics_tab(), "Analytics")
        return tabs

    def _checkbox_group(self, title: str, entries) -> QGroupBox:
        group = QGroupBox(title)
        layout = QGridLayout()
        for i, (name, label) in enumerate(entries):
            checkbox = QCheckBox(label)
            checkbox.toggled.connect(lambda checked, n=name: self.set_option(n, checked))
            self.option_checkboxes[name] = checkbox
            layout.addWidget(checkbox, i // 2, i % 2)
        group.setLayout(layout)
        return group

    def create_options_tab(self) -> QWidget:
        """Create the rule option groups."""
        widget = QWidget()
        layout = QVBoxLayout()

        layout.addWidget(self._checkbox_group("Skip", SKIP_OPTIONS))
        layout.addWidget(self._checkbox_group("Convert only", CONVERT_ONLY_OPTIONS))
        layout.addWidget(self._checkbox_group("Apply only to", APPLY_OPTIONS))
        layout.addWidget(self._checkbox_group("Ignore inside", IGNORE_OPTIONS))

        counts = QGroupBox("Counts (0 = off)")
        counts_layout = QGridLayout()
        for i, (name, label) in enumerate(COUNT_OPTIONS):
            spinbox = QSpinBox()
            spinbox.setRange(0, 9999)
            spinbox.valueChanged.connect(lambda value, n=name: self.set_option(n, value))
            self.option_spinboxes[name] = spinbox
            counts_layout.addWidget(QLabel(label), i, 0)
            counts_layout.addWidget(spinbox, i, 1)
        counts.setLayout(counts_layout)
        layout.addWidget(counts)

        chars = QGroupBox("Only change these characters")
        chars_layout = QGridLayout()
        for i, char_type in enumerate(CharType):
            checkbox = QCheckBox(char_type.value.capitalize())
            checkbox.toggled.connect(self.on_char_types_changed)
            self.char_type_checkboxes[char_type] = checkbox
            chars_layout.addWidget(checkbox, i // 3, i % 3)
        chars.setLayout(chars_layout)
        layout.addWidget(chars)

        preserve = QCheckBox("Preserve existing capitalization")
        preserve.toggled.connect(lambda checked: self.set_option('preserve_capitalization', checked))
        self.option_checkboxes['preserve_capitalization'] = preserve
        layout.addWidget(preserve)

        stop_layout = QHBoxLayout()
        self.stop_words_edit = QLineEdit()
        self.stop_words_edit.setPlaceholderText("Stop words (up to 5)")
        self.stop_words_edit.textChanged.connect(self.on_stop_words_changed)
        self.save_stop_words_button = QPushButton("Save")
        self.save_stop_words_button.clicked.connect(self.save_stop_words)
        stop_layout.addWidget(self.stop_words_edit, 1)
        stop_layout.addWidget(self.save_stop_words_button)
        layout.addLayout(stop_layout)

        self.stop_words_error_label = QLabel("")
        self.stop_words_error_label.setStyleSheet(ERROR_STYLE)
        layout.addWidget(self.stop_words_error_label)

        layout.addStretch()
        widget.setLayout(layout)
        return widget

    def create_tools_tab(self) -> QWidget:
        """Create the cleanup tool controls."""
        widget = QWidget()
        layout = QVBoxLayout()

        steps = QGroupBox("Steps")
        steps_layout = QVBoxLayout()
        for processor in get_available_processors():
            checkbox = QCheckBox(processor['description'])
            checkbox.setChecked(processor['enabled'])
            self.tool_checkboxes[processor['name']] = checkbox
            steps_layout.addWidget(checkbox)
        steps.setLayout(steps_layout)
        layout.addWidget(steps)

        formatting = QGroupBox("Formatting")
        formatting_layout = QGridLayout()
        for i, name in enumerate(FormatOptions.__dataclass_fields__):
            checkbox = QCheckBox(FORMAT_LABELS.get(name, name))
            self.format_checkboxes[name] = checkbox
            formatting_layout.addWidget(checkbox, i // 2, i % 2)
        formatting.setLayout(formatting_layout)
        layout.addWidget(formatting)

        inputs = QGridLayout()
        self.chars_edit = QLineEdit()
        self.find_edit = QLineEdit()
        self.replace_edit = QLineEdit()
        inputs.addWidget(QLabel("Characters to remove:"), 0, 0)
        inputs.addWidget(self.chars_edit, 0, 1)
        inputs.addWidget(QLabel("Find:"), 1, 0)
        inputs.addWidget(self.find_edit, 1, 1)
        inputs.addWidget(QLabel("Replace with:"), 2, 0)
        inputs.addWidget(self.replace_edit, 2, 1)
        layout.addLayout(inputs)

        self.run_tools_button = QPushButton("Run Tools on Input")
        self.run_tools_button.setStyleSheet("font-weight: bold; padding: 8px 16px;")
        self.run_tools_button.clicked.connect(self.start_processing)
        layout.addWidget(self.run_tools_button)

        layout.addStretch()
        widget.setLayout(layout)
        return widget

    def create_analytics_tab(self) -> QWidget:
        """Create the live analytics panel."""
        widget = QWidget()
        layout = QGridLayout()

        rows = [
            ('char_count', "Characters"),
            ('word_count', "Words"),
            ('sentence_count', "Sentences"),
            ('line_count', "Lines"),
            ('paragraph_count', "Paragraphs"),
            ('unique_word_count', "Unique words"),
            ('top_words', "Top words"),
            ('top_letters', "Top letters"),
            ('longest_words', "Longest words"),
            ('sentence_structure', "Sentence shapes"),
        ]
        for i, (name, label) in enumerate(rows):
            value_label = QLabel("0")
            value_label.setWordWrap(True)
            self.analytics_labels[name] = value_label
            layout.addWidget(QLabel(f"{label}:"), i, 0, Qt.AlignTop)
            layout.addWidget(value_label, i, 1)
        layout.setRowStretch(len(rows), 1)

        widget.setLayout(layout)
        return widget

    def create_status_section(self) -> QWidget:
        """Create the status and progress section."""
        widget = QWidget()
        layout = QHBoxLayout()

        self.status_label = QLabel("Ready")
        layout.addWidget(self.status_label, 1)

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        layout.addWidget(self.progress_bar)

        widget.setLayout(layout)
        return widget

    def apply_styles(self):
        """Apply custom styles to the interface."""
        style = """
        QMainWindow {
            background-color: #f0f0f0;
        }
        QGroupBox {
            font-weight: bold;
            border: 2px solid #cccccc;
            border-radius: 5px;
            margin-top: 1ex;
            padding: 5px;
        }
        QGroupBox::title {
            subcontrol-origin: margin;
            left: 10px;
            padding: 0 5px 0 5px;
        }
        QPushButton {
            background-color: #e1e1e1;
            border: 1px solid #999999;
            border-radius: 3px;
            padding: 6px 12px;
        }
        QPushButton:hover {
            background-color: #d4d4d4;
        }
        """
        self.setStyleSheet(style)

    # Settings

    def load_configuration(self):
        """Load settings from the .casefix.txt data file."""
        self.ctx = load_data_file(self.ctx, self.data_file)
        self.stop_words_edit.blockSignals(True)
        self.stop_words_edit.setText(", ".join(sorted(self.ctx.options.stop_words)))
        self.stop_words_edit.blockSignals(False)
        self.sync_option_widgets()
        log_message("Configuration loaded")

    def set_option(self, name: str, value):
        """Apply one option change; exclusive counterparts are cleared by updated()."""
        self.ctx.options = self.ctx.options.updated(**{name: value})
        self.sync_option_widgets()
        self.refresh_output()

    def sync_option_widgets(self):
        """Show the current options in the widgets without re-triggering them."""
        options = self.ctx.options

        for name, checkbox in self.option_checkboxes.items():
            checkbox.blockSignals(True)
            checkbox.setChecked(getattr(options, name))
            checkbox.blockSignals(False)

        for name, spinbox in self.option_spinboxes.items():
            spinbox.blockSignals(True)
            spinbox.setValue(getattr(options, name))
            spinbox.blockSignals(False)

        for char_type, checkbox in self.char_type_checkboxes.items():
            checkbox.blockSignals(True)
            checkbox.setChecked(char_type in options.char_types)
            checkbox.blockSignals(False)

        self.style_combo.blockSignals(True)
        self.style_combo.setCurrentIndex(max(0, self.style_combo.findData(options.style)))
        self.style_combo.blockSignals(False)

        self.scope_buttons[options.scope].setChecked(True)
        self.line_selection_edit.setEnabled(options.scope is Scope.LINES)
        self.line_prefix_edit.setEnabled(options.scope is Scope.LINES)
        self.line_keyword_edit.setEnabled(options.scope is Scope.LINES)

    def on_style_changed(self, index: int):
        self.set_option('style', self.style_combo.itemData(index))

    def on_scope_changed(self, button):
        for scope, scope_button in self.scope_buttons.items():
            if scope_button is button:
                self.set_option('scope', scope)
                if scope is Scope.LINES:
                    self.on_line_selection_changed(self.line_selection_edit.text())
                return

    def on_char_types_changed(self, checked: bool):
        selected = [t for t, checkbox in self.char_type_checkboxes.items() if checkbox.isChecked()]
        self.set_option('char_types', selected)

    def on_line_selection_changed(self, text: str):
        """Validate the line selection; errors are shown and the last valid selection kept."""
        if not text.strip():
            self.line_error_label.setText("")
            self.set_option('selected_lines', None)
            return

        selection = parse_line_selection(text, count_lines(self.input_edit.toPlainText()))
        if selection.error:
            self.line_error_label.setText(selection.error)
            return
        self.line_error_label.setText("")
        self.set_option('selected_lines', selection.lines)

    def on_stop_words_changed(self, text: str):
        selection = parse_stop_words(text)
        if selection.error:
            self.stop_words_error_label.setText(selection.error)
            return
        self.stop_words_error_label.setText("")
        self.set_option('stop_words', selection.words)

    def save_stop_words(self):
        if self.stop_words_error_label.text():
            QMessageBox.warning(self, "Stop Words", self.stop_words_error_label.text())
            return
        save_stop_words(self.ctx.options.stop_words, self.data_file)
        self.update_status(f"Saved {len(self.ctx.options.stop_words)} stop words")

    # Text updates

    def on_input_changed(self):
        text = self.input_edit.toPlainText()
        self.ctx.text = text
        if self.ctx.options.scope is Scope.LINES and self.line_selection_edit.text().strip():
            # line numbers are validated against the current line count
            self.on_line_selection_changed(self.line_selection_edit.text())
        self.refresh_output()
        self.update_analytics(text)

    def refresh_output(self):
        """Convert the input with the current options into the output pane."""
        if not hasattr(self, 'output_edit'):
            return
        output = convert_text(self.input_edit.toPlainText(), self.ctx.options)
        self.output_edit.setPlainText(output)

    def update_analytics(self, text: str):
        result = analyze_text(text)
        for name in ('char_count', 'word_count', 'sentence_count', 'line_count',
                     'paragraph_count', 'unique_word_count'):
            self.analytics_labels[name].setText(str(getattr(result, name)))
        self.analytics_labels['top_words'].setText(
            ", ".join(f"{w['word']} ({w['count']})" for w in result.top_words))
        self.analytics_labels['top_letters'].setText(
            ", ".join(f"{l['letter']} ({l['count']})" for l in result.top_letters))
        self.analytics_labels['longest_words'].setText(
            ", ".join(f"{w['word']} ({w['length']})" for w in result.longest_words))
        self.analytics_labels['sentence_structure'].setText(
            "\n".join(f"{s['count']} x {s['word_count']} words / {s['char_count']} chars"
                      for s in result.sentence_structure[:5]))

    def set_input_text(self, text: str):
        self.input_edit.setPlainText(text)

    def quick_case(self, mode: str):
        self.ctx.text = self.input_edit.toPlainText()
        self.ctx = apply_quick_case(self.ctx, mode)
        self.output_edit.setPlainText(self.ctx.text)
        self.update_status(f"Applied {mode} case")

    def copy_output(self):
        QApplication.clipboard().setText(self.output_edit.toPlainText())
        self.update_status("Output copied to clipboard")

    def use_output_as_input(self):
        self.set_input_text(self.output_edit.toPlainText())

    def show_duplicate_words(self):
        duplicates = find_duplicate_words(self.input_edit.toPlainText())
        self.output_edit.setPlainText(", ".join(duplicates) if duplicates else "No duplicate words found.")
        self.update_status(f"Found {len(duplicates)} duplicate words")

    def show_word_frequency(self):
        entries = word_frequency(self.input_edit.toPlainText())
        self.output_edit.setPlainText(format_word_frequency(entries))
        self.update_status(f"Counted {len(entries)} distinct words")

    # Tools pipeline

    def get_enabled_steps(self) -> Dict[str, bool]:
        """Get the currently enabled tool steps."""
        return {
            name: checkbox.isChecked()
            for name, checkbox in self.tool_checkboxes.items()
        }

    def start_processing(self):
        """Run the enabled tools on the input text in a worker thread."""
        self.ctx.text = self.input_edit.toPlainText()
        if not self.ctx.text:
            QMessageBox.warning(self, "No Text", "Enter or open some text first.")
            return

        self.ctx.chars_to_remove = self.chars_edit.text()
        self.ctx.find_text = self.find_edit.text()
        self.ctx.replace_text = self.replace_edit.text()
        self.ctx.format_options = FormatOptions(**{
            name: checkbox.isChecked() for name, checkbox in self.format_checkboxes.items()
        })

        self.run_tools_button.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setValue(0)

        self.processing_thread = ProcessingThread(self.ctx, self.get_enabled_steps())
        self.processing_thread.progress_updated.connect(self.on_progress_updated)
        self.processing_thread.status_updated.connect(self.update_status)
        self.processing_thread.processing_complete.connect(self.on_processing_complete)
        self.processing_thread.error_occurred.connect(self.on_processing_error)
        self.processing_thread.start()

    def on_progress_updated(self, current: int, total: int, description: str):
        """Handle progress updates from processing thread."""
        progress_percent = int((current / total) * 100) if total > 0 else 0
        self.progress_bar.setValue(progress_percent)
        self.update_status(f"Step {current}/{total}: {description}")

    def on_processing_complete(self):
        self.ctx = self.processing_thread.ctx
        self.output_edit.setPlainText(self.ctx.text)
        self.progress_bar.setVisible(False)
        self.run_tools_button.setEnabled(True)
        self.update_status("Tools complete.")
        log_message(self.ctx.get_processing_summary())

    def on_processing_error(self, error_message: str):
        self.progress_bar.setVisible(False)
        self.run_tools_button.setEnabled(True)
        QMessageBox.critical(self, "Processing Error", error_message)

    def update_status(self, status: str):
        self.status_label.setText(status)

    # Files

    def browse_file(self):
        """Handle file browser dialog."""
        initial_dir = str(self.ctx.default_file_directory) if self.ctx.default_file_directory else str(Path.home())

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Select file to convert",
            initial_dir,
            "Text files (*.txt *.md);;HTML files (*.html *.xhtml);;All files (*.*)"
        )

        if file_path:
            self.load_file(file_path)

    def load_file(self, file_path: str):
        """Load a file into the input pane."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            error_msg = f"Error loading file: {e}"
            log_message(error_msg, level="ERROR")
            QMessageBox.critical(self, "File Error", error_msg)
            return

        self.ctx.filepath = file_path
        self.file_label.setText(os.path.basename(file_path))
        self.file_label.setToolTip(file_path)
        self.set_input_text(content)
        self.update_status(f"Loaded file: {os.path.basename(file_path)}")
        log_message(f"File loaded: {file_path}")

    def save_output(self):
        """Save the output pane to a file."""
        output = self.output_edit.toPlainText()
        if not output:
            QMessageBox.warning(self, "No Content", "There is no output to save.")
            return

        if self.ctx.filepath:
            base_name = os.path.splitext(os.path.basename(self.ctx.filepath))[0]
            default_name = f"{base_name}_converted.txt"
        else:
            default_name = "casefix_output.txt"

        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save converted text",
            default_name,
            "Text files (*.txt);;All files (*.*)"
        )
        if file_path:
            self.write_output(file_path, output)

    def write_output(self, file_path: str, output: str):
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(output)
        except OSError as e:
            error_msg = f"Error saving file: {e}"
            log_message(error_msg, level="ERROR")
            QMessageBox.critical(self, "Save Error", error_msg)
            return
        self.update_status(f"Output saved to: {file_path}")
        log_message(f"Output saved to: {file_path}")

    def choose_default_directory(self):
        directory = QFileDialog.getExistingDirectory(
            self,
            "Select Default Directory for File Dialog",
            str(self.ctx.default_file_directory or Path.home())
        )
        if directory:
            save_default_directory_to_data_file(directory, self.data_file)
            self.ctx.default_file_directory = Path(directory)
            self.update_status(f"Default directory set to: {directory}")

    def closeEvent(self, event):
        """Handle application close event."""
        if self.processing_thread and self.processing_thread.isRunning():
            self.processing_thread.wait()
        log_message("Application closing")
        event.accept()


def main():
    """Main application entry point."""
    app = QApplication(sys.argv)
    app.setApplicationName("Casefix")
    app.setOrganizationName("Casefix")

    window = CasefixMainWindow()
    window.show()
    log_message("Casefix PyQt5 application started")

    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
