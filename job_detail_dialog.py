# job_detail_dialog.py
"""
Edit dialog for one maintenance job.
Title, description, start, duration and status are editable; vehicle, assignee
and client are shown as-is. Saving writes the changes through the DataManager,
which reloads the job list.
"""

from PyQt6.QtWidgets import (QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QWidget, QComboBox,
                             QFormLayout, QLineEdit, QPlainTextEdit)

from constants import GeneralText, JobDetailText, WindowSize, format_text
from custom_dialogs import BaseDialog
from error_messages import JobValidationError
from job_schema import STATUS_TAGS, job_changes
from timezone_helper import get_user_timezone

class JobDetailDialog(BaseDialog):
    def __init__(self, job, data_manager, parent=None, settings=None, pos=None):
        super().__init__(parent, settings, pos)
        self.job = job
        self.data_manager = data_manager
        self.setWindowTitle(JobDetailText.WINDOW_TITLE)
        self.setModal(True)
        self.setMinimumSize(WindowSize.DIALOG_WIDTH, WindowSize.DIALOG_HEIGHT)
        self.init_ui()

    def init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        background_widget = QWidget()
        background_widget.setObjectName("dialog_background")
        main_layout.addWidget(background_widget)

        content_layout = QVBoxLayout(background_widget)
        content_layout.setContentsMargins(15, 15, 15, 15)
        content_layout.setSpacing(8)

        form = QFormLayout()
        self.title_edit = QLineEdit(self.job.title)
        self.title_edit.setStyleSheet("font-weight: bold; font-size: 12pt;")
        form.addRow(JobDetailText.LABEL_TITLE, self.title_edit)

        self.description_edit = QPlainTextEdit(self.job.description)
        self.description_edit.setFixedHeight(70)
        form.addRow(JobDetailText.LABEL_DESCRIPTION, self.description_edit)

        self.initial_start_text = self.job.start_time.strftime(JobDetailText.START_FORMAT)
        self.start_edit = QLineEdit(self.initial_start_text)
        self.start_edit.setPlaceholderText(JobDetailText.START_PLACEHOLDER)
        form.addRow(JobDetailText.LABEL_START, self.start_edit)

        self.initial_duration_text = format_text(JobDetailText.DURATION_FORMAT, hours=self.job.duration_hours)
        self.duration_edit = QLineEdit(self.initial_duration_text)
        self.duration_edit.setPlaceholderText(JobDetailText.DURATION_PLACEHOLDER)
        form.addRow(JobDetailText.LABEL_DURATION, self.duration_edit)

        self.status_combo = QComboBox()
        for status in STATUS_TAGS:
            self.status_combo.addItem(JobDetailText.STATUS_NAMES[status], status)
        self.status_combo.setCurrentIndex(STATUS_TAGS.index(self.job.status))
        form.addRow(JobDetailText.LABEL_STATUS, self.status_combo)

        if self.job.vehicle_model or self.job.vehicle_registration:
            vehicle = " ".join(p for p in (self.job.vehicle_model, self.job.vehicle_registration) if p)
            form.addRow(JobDetailText.LABEL_VEHICLE, QLabel(vehicle))
        form.addRow(JobDetailText.LABEL_ASSIGNEE, QLabel(self.job.subtitle))
        if self.job.client_name:
            form.addRow(JobDetailText.LABEL_CLIENT, QLabel(self.job.client_name))
        content_layout.addLayout(form)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color: #F87171;")
        self.error_label.hide()
        content_layout.addWidget(self.error_label)
        content_layout.addStretch(1)

        button_layout = QHBoxLayout()
        button_layout.addStretch(1)
        self.save_button = QPushButton(GeneralText.SAVE)
        self.save_button.clicked.connect(self.save)
        self.close_button = QPushButton(GeneralText.CLOSE)
        self.close_button.clicked.connect(self.reject)
        button_layout.addWidget(self.save_button)
        button_layout.addWidget(self.close_button)
        content_layout.addLayout(button_layout)

    def collect_changes(self):
        """Changed fields under the backend keys. Raises JobValidationError."""
        start_text = self.start_edit.text().strip()
        duration_text = self.duration_edit.text().strip()
        return job_changes(
            self.job,
            get_user_timezone(self.data_manager.settings),
            title=self.title_edit.text(),
            description=self.description_edit.toPlainText(),
            # untouched fields keep their full precision
            start_time=start_text if start_text != self.initial_start_text else None,
            duration=duration_text if duration_text != self.initial_duration_text else None,
            status=self.status_combo.currentData(),
        )

    def save(self):
        try:
            changes = self.collect_changes()
        except JobValidationError as e:
            self.error_label.setText(str(e))
            self.error_label.show()
            return
        if not changes:
            self.accept()
            return
        updated = self.data_manager.update_job(self.job.id, changes)
        if updated is not None:
            self.job = updated
            self.accept()
