# views/base_view.py
import datetime

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor

from config import DEFAULT_THEME
from constants import get_theme_colors

class BaseViewWidget(QWidget):
    """Common base of the calendar views. A view only draws the plan it is given."""

    job_selected = pyqtSignal(object)

    def __init__(self, settings, tz_provider=None, parent=None):
        super().__init__(parent)
        self.settings = settings
        self._tz_provider = tz_provider
        self.plan = None
        self.job_rects = []

    def now(self):
        tz = self._tz_provider() if self._tz_provider else None
        return datetime.datetime.now(tz)

    def today(self):
        return self.now().date()

    def theme_colors(self):
        colors = get_theme_colors(self.settings.get("theme", DEFAULT_THEME))
        return {key: QColor(value) for key, value in colors.items()}

    def set_plan(self, plan):
        self.plan = plan
        self.refresh()

    def get_job_at(self, pos):
        for rect, job in self.job_rects:
            if rect.contains(pos):
                return job
        return None

    def mousePressEvent(self, event):
        job = self.get_job_at(event.pos())
        if job is not None:
            self.job_selected.emit(job)
            event.accept()
            return
        super().mousePressEvent(event)

    def refresh(self):
        raise NotImplementedError("This method must be implemented by subclasses.")
