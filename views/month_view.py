# views/month_view.py
from PyQt6.QtCore import Qt, QRect, QRectF
from PyQt6.QtGui import QPainter, QColor, QPen

from constants import CalendarColors, CalendarText, MonthViewLayout, format_text
from .base_view import BaseViewWidget
from .widgets import draw_job_chip, fit_chips

def grid_cell_rects(width, height, rows, top=0):
    """Cell rectangles of a 7-column grid, row by row."""
    rects = []
    if rows <= 0:
        return rects
    col_width = width / 7
    row_height = (height - top) / rows
    for row in range(rows):
        for col in range(7):
            rects.append(QRect(int(col * col_width), int(top + row * row_height),
                               int(col_width), int(row_height)))
    return rects


class MonthView(BaseViewWidget):
    """Seven-column month grid; days outside the anchor month are dimmed."""

    def __init__(self, settings, tz_provider=None, parent=None):
        super().__init__(settings, tz_provider, parent)
        self.setMinimumSize(7 * 80, 6 * 70)

    def refresh(self):
        self.update()

    def paintEvent(self, event):
        if self.plan is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        colors = self.theme_colors()
        painter.fillRect(self.rect(), colors['background'])
        self.job_rects = []

        buckets = self.plan.buckets
        header_height = MonthViewLayout.WEEKDAY_HEADER_HEIGHT
        cell_rects = grid_cell_rects(self.width(), self.height(), len(buckets) // 7, header_height)

        painter.setPen(colors['text_muted'])
        for col, bucket in enumerate(buckets[:7]):
            rect = QRect(cell_rects[col].x(), 0, cell_rects[col].width(), header_height)
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter,
                             CalendarText.WEEKDAYS_SHORT[bucket.day.weekday()])

        for rect, bucket in zip(cell_rects, buckets):
            self._draw_cell(painter, rect, bucket, colors)
        painter.end()

    def _draw_cell(self, painter, rect, bucket, colors):
        painter.save()
        if not bucket.in_current_period:
            painter.fillRect(rect, colors['background_other_month'])
        painter.setPen(QPen(colors['grid_line'], 1))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(rect)

        pad = MonthViewLayout.CELL_PADDING
        number_rect = QRect(rect.x() + pad, rect.y() + pad, rect.width() - pad * 2,
                            MonthViewLayout.DAY_NUMBER_HEIGHT)
        if bucket.is_today:
            painter.setPen(QPen(QColor(CalendarColors.TODAY_RING), 2))
            painter.drawRoundedRect(QRectF(rect.adjusted(1, 1, -1, -1)), 4, 4)
        painter.setPen(colors['text'] if bucket.in_current_period else colors['text_muted'])
        painter.drawText(number_rect, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, bucket.label)

        y = number_rect.bottom() + MonthViewLayout.CHIP_SPACING
        drawn, more_count = fit_chips(y, rect.y() + rect.height(), len(bucket.jobs), bucket.hidden_count,
                                      MonthViewLayout.CHIP_HEIGHT, MonthViewLayout.CHIP_SPACING)
        for positioned in bucket.jobs[:drawn]:
            chip = QRect(rect.x() + pad, y, rect.width() - pad * 2, MonthViewLayout.CHIP_HEIGHT)
            if not bucket.in_current_period:
                painter.setOpacity(0.5)
            draw_job_chip(painter, chip, positioned.job, continues=positioned.is_truncated_end)
            painter.setOpacity(1.0)
            self.job_rects.append((chip, positioned.job))
            y += MonthViewLayout.CHIP_HEIGHT + MonthViewLayout.CHIP_SPACING

        if more_count:
            more_rect = QRect(rect.x() + pad, y, rect.width() - pad * 2, MonthViewLayout.CHIP_HEIGHT)
            painter.setPen(QColor(CalendarColors.MORE_JOBS_TEXT))
            painter.drawText(more_rect, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
                             format_text(CalendarText.MORE_JOBS_FORMAT, count=more_count))
        painter.restore()
