# views/time_grid_view.py
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QScrollArea
from PyQt6.QtCore import Qt, QRect, QTimer
from PyQt6.QtGui import QPainter, QColor, QPen

from config import DEFAULT_HOUR_HEIGHT
from constants import CalendarColors, TimeGridLayout, Timer, day_label, hour_label
from settings_manager import get_int_setting
from .base_view import BaseViewWidget
from .time_buckets import HOURS_PER_DAY
from .widgets import draw_job, format_time_range

def column_positions(total_width, num_days):
    """x coordinate of every column edge right of the hour gutter."""
    positions = [TimeGridLayout.TIME_GUTTER_WIDTH]
    grid_width = max(0, total_width - TimeGridLayout.TIME_GUTTER_WIDTH)
    base_col_width = grid_width // num_days if num_days else 0
    remainder = grid_width % num_days if num_days else 0

    current_x = TimeGridLayout.TIME_GUTTER_WIDTH
    for i in range(num_days):
        current_x += base_col_width + (1 if i < remainder else 0)
        positions.append(current_x)
    return positions

def block_rect(column_left, column_right, top_offset, height, hour_height):
    """Pixel rectangle of a job block: ``height * hour_height`` minus the block gap."""
    x = column_left + TimeGridLayout.BLOCK_MARGIN
    width = (column_right - column_left) - TimeGridLayout.BLOCK_MARGIN * 2
    y = top_offset * hour_height
    pixel_height = max(height * hour_height - TimeGridLayout.BLOCK_GAP, 1)
    return QRect(int(x), int(y), int(width), int(pixel_height))


class HeaderCanvas(QWidget):
    def __init__(self, parent_view):
        super().__init__(parent_view)
        self.parent_view = parent_view
        self.setFixedHeight(TimeGridLayout.HEADER_HEIGHT)

    def paintEvent(self, event):
        plan = self.parent_view.plan
        if plan is None:
            return
        days = plan.days()
        colors = self.parent_view.theme_colors()
        today = self.parent_view.today()
        x_coords = column_positions(self.width(), len(days))

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), colors['background'])
        for i, day in enumerate(days):
            rect = QRect(x_coords[i], 0, x_coords[i + 1] - x_coords[i], self.height())
            painter.setPen(QColor(CalendarColors.TODAY_RING) if day == today else colors['text'])
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, day_label(day))
        painter.end()


class TimeGridCanvas(QWidget):
    def __init__(self, parent_view):
        super().__init__(parent_view)
        self.parent_view = parent_view
        self.job_rects = []
        self.setMouseTracking(True)

    def paintEvent(self, event):
        plan = self.parent_view.plan
        if plan is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        colors = self.parent_view.theme_colors()
        painter.fillRect(self.rect(), colors['background'])

        columns = plan.jobs_by_day()
        x_coords = column_positions(self.width(), len(columns))
        self._draw_time_grid(painter, list(columns), x_coords, colors)
        self._draw_jobs(painter, columns, x_coords)
        self._draw_current_time(painter, list(columns), x_coords)
        painter.end()

    def _draw_time_grid(self, painter, days, x_coords, colors):
        painter.save()
        hour_height = self.parent_view.hour_height
        today = self.parent_view.today()
        if today in days:
            i = days.index(today)
            painter.fillRect(x_coords[i], 0, x_coords[i + 1] - x_coords[i], self.height(),
                             QColor(*CalendarColors.TODAY_HIGHLIGHT_RGBA))

        painter.setPen(QPen(colors['grid_line'], 1))
        for hour in range(1, HOURS_PER_DAY + 1):
            y = hour * hour_height
            painter.drawLine(TimeGridLayout.TIME_GUTTER_WIDTH, y, self.width(), y)
        for x in x_coords:
            painter.drawLine(x, 0, x, self.height())

        painter.setPen(colors['text_muted'])
        for hour in range(HOURS_PER_DAY):
            rect = QRect(0, hour * hour_height, TimeGridLayout.TIME_GUTTER_WIDTH - 8, 20)
            painter.drawText(rect, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignTop, hour_label(hour))
        painter.restore()

    def _draw_jobs(self, painter, columns, x_coords):
        self.job_rects = []
        hour_height = self.parent_view.hour_height
        for i, positioned_jobs in enumerate(columns.values()):
            for positioned in positioned_jobs:
                rect = block_rect(x_coords[i], x_coords[i + 1],
                                  positioned.top_offset, positioned.height, hour_height)
                self.job_rects.append((rect, positioned.job))
                draw_job(painter, rect, positioned.job,
                         time_text=format_time_range(positioned.job),
                         subtitle_text=positioned.job.subtitle)

    def _draw_current_time(self, painter, days, x_coords):
        now = self.parent_view.now()
        if now.date() not in days:
            return
        i = days.index(now.date())
        y = int((now.hour + now.minute / 60) * self.parent_view.hour_height)
        painter.save()
        painter.setPen(QPen(QColor(CalendarColors.CURRENT_TIME_LINE), 2))
        painter.drawLine(x_coords[i], y, x_coords[i + 1], y)
        painter.restore()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            for rect, job in self.job_rects:
                if rect.contains(event.pos()):
                    self.parent_view.job_selected.emit(job)
                    event.accept()
                    return
        super().mousePressEvent(event)


class TimeGridView(BaseViewWidget):
    """Hour grid used by both the day view (one column) and the week view (seven)."""

    def __init__(self, settings, tz_provider=None, parent=None):
        super().__init__(settings, tz_provider, parent)
        self.hour_height = get_int_setting(settings, "hour_height", DEFAULT_HOUR_HEIGHT, 16, 256)
        self._scrolled = False
        self.initUI()

        self.timeline_timer = QTimer(self)
        self.timeline_timer.setInterval(Timer.CURRENT_TIME_REFRESH)
        self.timeline_timer.timeout.connect(self.time_grid_canvas.update)
        self.timeline_timer.start()

    def initUI(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.header_canvas = HeaderCanvas(self)
        main_layout.addWidget(self.header_canvas)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setObjectName("time_grid_scroll_area")
        main_layout.addWidget(self.scroll_area)

        self.time_grid_canvas = TimeGridCanvas(self)
        self.time_grid_canvas.setMinimumHeight(self.hour_height * HOURS_PER_DAY)
        self.scroll_area.setWidget(self.time_grid_canvas)

    def refresh(self):
        self.header_canvas.update()
        self.time_grid_canvas.update()

    def scroll_offset_for_hour(self, hour):
        return max(0, hour * self.hour_height - TimeGridLayout.SCROLL_CONTEXT)

    def showEvent(self, event):
        super().showEvent(event)
        if not self._scrolled:
            self._scrolled = True
            offset = self.scroll_offset_for_hour(self.now().hour)
            QTimer.singleShot(0, lambda: self.scroll_area.verticalScrollBar().setValue(offset))
