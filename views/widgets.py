# views/widgets.py
from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QColor, QFontMetrics, QPainterPath

from constants import TimeGridLayout, get_status_colors

def get_text_color_for_background(hex_color):
    try:
        hex_color = hex_color.lstrip('#')
        r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
    except (AttributeError, ValueError):
        return '#FFFFFF'
    luminance = (0.299 * r + 0.587 * g + 0.114 * b)
    return '#000000' if luminance > 149 else '#FFFFFF'

def format_time_range(job):
    start = job.start_time
    end = job.end_time
    return f"{start.strftime('%H:%M')} - {end.strftime('%H:%M')}"

def fit_chips(top, limit, count, hidden, chip_height, spacing):
    """
    How many of ``count`` chips can be stacked from ``top`` without passing
    ``limit``. When any job stays out of sight one row is kept for the
    "+K more" label. Returns (drawn, more_count).
    """
    row = chip_height + spacing
    rows = max(0, (limit - top + spacing) // row)
    if count + (1 if hidden else 0) <= rows:
        return count, hidden
    drawn = min(count, max(0, rows - 1))
    return drawn, hidden + count - drawn

def _draw_status_shape(painter, rect, status):
    border, fill = get_status_colors(status)
    path = QPainterPath()
    path.addRoundedRect(QRectF(rect), TimeGridLayout.BLOCK_RADIUS, TimeGridLayout.BLOCK_RADIUS)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QColor(fill))
    painter.drawPath(path)
    painter.setClipPath(path)

    # status bar on the left edge
    bar = QRectF(rect.x(), rect.y(), TimeGridLayout.STATUS_BAR_WIDTH, rect.height())
    painter.fillRect(bar, QColor(border))
    return fill

def draw_job(painter, rect, job, time_text="", subtitle_text=""):
    """Job block for the time grid: status bar, title, time and vehicle lines."""
    painter.save()
    fill = _draw_status_shape(painter, rect, job.status)

    painter.setPen(QColor(get_text_color_for_background(fill)))
    text_rect = rect.adjusted(TimeGridLayout.STATUS_BAR_WIDTH + 4, 2, -4, -2)
    fm = QFontMetrics(painter.font())
    line_height = fm.height()

    lines = [job.title]
    if time_text:
        lines.append(time_text)
    if subtitle_text:
        lines.append(subtitle_text)

    y = text_rect.y()
    for line in lines:
        if y + line_height > text_rect.bottom() + 1 and line is not lines[0]:
            break
        elided = fm.elidedText(line, Qt.TextElideMode.ElideRight, max(0, text_rect.width()))
        painter.drawText(text_rect.x(), y, text_rect.width(), line_height,
                         Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, elided)
        y += line_height
    painter.restore()

def draw_job_chip(painter, rect, job, continues=False):
    """One-line chip for the month and year grids."""
    painter.save()
    fill = _draw_status_shape(painter, rect, job.status)
    painter.setPen(QColor(get_text_color_for_background(fill)))
    text = f"{job.title} →" if continues else job.title
    text_rect = rect.adjusted(TimeGridLayout.STATUS_BAR_WIDTH + 3, 0, -3, 0)
    fm = QFontMetrics(painter.font())
    elided = fm.elidedText(text, Qt.TextElideMode.ElideRight, max(0, text_rect.width()))
    painter.drawText(text_rect, Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter, elided)
    painter.restore()
