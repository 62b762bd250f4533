# views/year_view.py
from PyQt6.QtCore import Qt, QRect, QRectF
from PyQt6.QtGui import QPainter, QColor, QPen

from constants import CalendarColors, CalendarText, YearViewLayout, format_text
from .base_view import BaseViewWidget
from .widgets import draw_job_chip, fit_chips

def card_rects(width, height, count, columns=YearViewLayout.COLUMNS):
    """Month card rectangles laid out left to right, ``columns`` per row."""
    rows = (count + columns - 1) // columns
    if rows == 0:
        return []
    spacing = YearViewLayout.CARD_SPACING
    card_width = (width - spacing * (columns + 1)) / columns
    card_height = (height - spacing * (rows + 1)) / rows
    rects = []
    for i in range(count):
        row, col = divmod(i, columns)
        x = spacing + col * (card_width + spacing)
        y = spacing + row * (card_height + spacing)
        rects.append(QRect(int(x), int(y), int(card_width), int(card_height)))
    return rects


class YearView(BaseViewWidget):
    """Twelve month cards, four per row."""

    def __init__(self, settings, tz_provider=None, parent=None):
        super().__init__(settings, tz_provider, parent)
        self.setMinimumSize(4 * 160, 3 * 150)

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

        for rect, bucket in zip(card_rects(self.width(), self.height(), len(self.plan.buckets)),
                                self.plan.buckets):
            self._draw_card(painter, rect, bucket, colors)
        painter.end()

    def _draw_card(self, painter, rect, bucket, colors):
        painter.save()
        pen_color = QColor(CalendarColors.TODAY_RING) if bucket.is_today else colors['grid_line']
        painter.setPen(QPen(pen_color, 2 if bucket.is_today else 1))
        painter.setBrush(colors['background_other_month'])
        painter.drawRoundedRect(QRectF(rect), YearViewLayout.CARD_RADIUS, YearViewLayout.CARD_RADIUS)

        pad = YearViewLayout.CARD_PADDING
        title_rect = QRect(rect.x() + pad, rect.y() + pad, rect.width() - pad * 2, YearViewLayout.TITLE_HEIGHT)
        painter.setPen(colors['text'])
        font = painter.font()
        font.setBold(True)
        painter.setFont(font)
        painter.drawText(title_rect, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, bucket.label)
        font.setBold(False)
        painter.setFont(font)

        y = title_rect.bottom() + YearViewLayout.CHIP_SPACING
        drawn, more_count = fit_chips(y, rect.bottom() - pad + 1, len(bucket.jobs), bucket.hidden_count,
                                      YearViewLayout.CHIP_HEIGHT, YearViewLayout.CHIP_SPACING)
        for positioned in bucket.jobs[:drawn]:
            chip = QRect(rect.x() + pad, y, rect.width() - pad * 2, YearViewLayout.CHIP_HEIGHT)
            draw_job_chip(painter, chip, positioned.job, continues=positioned.is_truncated_end)
            self.job_rects.append((chip, positioned.job))
            y += YearViewLayout.CHIP_HEIGHT + YearViewLayout.CHIP_SPACING

        if more_count:
            more_rect = QRect(rect.x() + pad, y, rect.width() - pad * 2, YearViewLayout.CHIP_HEIGHT)
            painter.setPen(QColor(CalendarColors.MORE_JOBS_TEXT))
            painter.drawText(more_rect, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter,
                             format_text(CalendarText.MORE_JOBS_FORMAT, count=more_count))
        painter.restore()
