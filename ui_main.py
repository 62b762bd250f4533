import sys
import datetime

from PyQt6.QtWidgets import (QApplication, QWidget, QVBoxLayout, QHBoxLayout,
                             QPushButton, QStackedWidget, QLabel, QComboBox)
from PyQt6.QtCore import Qt, QTimer

from config import DEFAULT_VIEW, DEFAULT_WINDOW_GEOMETRY, DEFAULT_WEEK_START, ERROR_LOG_FILE
from constants import CalendarText, GeneralText, WindowSize, Spacing
from custom_dialogs import CustomMessageBox
from data_manager import DataManager
from error_messages import ErrorMessages, NavigationError, SettingsError
from job_detail_dialog import JobDetailDialog
from logger_config import add_file_handler, get_logger, setup_logger
from navigation_state import Granularity, NavigationState
from settings_manager import get_int_setting, load_settings, save_settings_safe
from timezone_helper import get_timezone_from_ip, get_user_timezone
from views.month_view import MonthView
from views.time_grid_view import TimeGridView
from views.year_view import YearView

logger = get_logger(__name__)

class MainWidget(QWidget):
    def __init__(self, settings, data_manager=None):
        super().__init__()
        self.settings = settings
        self.data_manager = data_manager or DataManager(settings)
        self.tz = get_user_timezone(settings)

        default_view = settings.get("default_view", DEFAULT_VIEW)
        if default_view not in Granularity.ALL:
            logger.warning("Unknown default_view %r, using %s", default_view, DEFAULT_VIEW)
            default_view = DEFAULT_VIEW
        self.navigation = NavigationState(
            granularity=default_view,
            week_start=get_int_setting(settings, "week_start", DEFAULT_WEEK_START, 0, 6),
            today_provider=self.today,
        )

        self.initUI()

        self.navigation.add_listener(self.on_view_state_changed)
        self.data_manager.data_updated.connect(self.refresh_current_view)
        self.data_manager.error_occurred.connect(self.show_error_message)
        self.data_manager.jobs_rejected.connect(self.on_jobs_rejected)

    def today(self):
        return datetime.datetime.now(self.tz).date()

    def initUI(self):
        self.setWindowTitle(CalendarText.APP_TITLE)
        geometry = self.settings.get("window_geometry", DEFAULT_WINDOW_GEOMETRY)
        self.setGeometry(*geometry)
        self.setMinimumSize(WindowSize.MIN_WIDTH, WindowSize.MIN_HEIGHT)

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(Spacing.MEDIUM, Spacing.MEDIUM, Spacing.MEDIUM, Spacing.MEDIUM)
        main_layout.setSpacing(Spacing.SMALL)

        header_label = QLabel(CalendarText.APP_TITLE)
        header_label.setObjectName("app_title_label")
        header_label.setStyleSheet("font-weight: bold; font-size: 14pt;")

        prev_button = QPushButton(CalendarText.PREVIOUS)
        next_button = QPushButton(CalendarText.NEXT)
        prev_button.setObjectName("nav_button")
        next_button.setObjectName("nav_button")
        prev_button.clicked.connect(self.go_to_previous)
        next_button.clicked.connect(self.go_to_next)

        self.title_label = QLabel()
        self.title_label.setObjectName("period_title_label")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        today_button = QPushButton(CalendarText.TODAY)
        today_button.setObjectName("today_button")
        today_button.clicked.connect(self.go_to_today)

        self.view_combo = QComboBox()
        for granularity in Granularity.ALL:
            self.view_combo.addItem(CalendarText.VIEW_NAMES[granularity], granularity)
        self.view_combo.setCurrentIndex(Granularity.ALL.index(self.navigation.granularity))
        self.view_combo.currentIndexChanged.connect(self.on_view_combo_changed)

        nav_layout = QHBoxLayout()
        nav_layout.addWidget(header_label)
        nav_layout.addStretch(1)
        nav_layout.addWidget(prev_button)
        nav_layout.addWidget(self.title_label)
        nav_layout.addWidget(next_button)
        nav_layout.addStretch(1)
        nav_layout.addWidget(today_button)
        nav_layout.addWidget(self.view_combo)
        main_layout.addLayout(nav_layout)

        self.stacked_widget = QStackedWidget()
        tz_provider = lambda: self.tz
        self.views = {
            Granularity.DAY: TimeGridView(self.settings, tz_provider),
            Granularity.WEEK: TimeGridView(self.settings, tz_provider),
            Granularity.MONTH: MonthView(self.settings, tz_provider),
            Granularity.YEAR: YearView(self.settings, tz_provider),
        }
        for granularity in Granularity.ALL:
            view = self.views[granularity]
            view.job_selected.connect(self.show_job_detail)
            self.stacked_widget.addWidget(view)
        main_layout.addWidget(self.stacked_widget, 1)

    # ---------------------------
    # Navigation
    # ---------------------------
    def _navigate(self, action, *args):
        try:
            action(*args)
        except NavigationError as e:
            logger.warning("Navigation refused: %s", e)
            self.show_error_message(GeneralText.ERROR, str(e), e.suggestions)

    def go_to_previous(self):
        self._navigate(self.navigation.previous)

    def go_to_next(self):
        self._navigate(self.navigation.next)

    def go_to_today(self):
        self._navigate(self.navigation.go_to_today)

    def on_view_combo_changed(self, index):
        granularity = self.view_combo.itemData(index)
        self._navigate(self.navigation.set_granularity, granularity)
        # keep the combo in sync when the change was refused
        self.view_combo.blockSignals(True)
        self.view_combo.setCurrentIndex(Granularity.ALL.index(self.navigation.granularity))
        self.view_combo.blockSignals(False)

    def on_view_state_changed(self, view_state):
        self.refresh_current_view()

    def refresh_current_view(self):
        view_state = self.navigation.to_view_state()
        plan = self.data_manager.get_render_plan(view_state, today=self.today())
        view = self.views[view_state.granularity]
        self.stacked_widget.setCurrentWidget(view)
        self.title_label.setText(plan.title)
        view.set_plan(plan)

    # ---------------------------
    # Dialogs
    # ---------------------------
    def show_job_detail(self, job):
        logger.debug("Job detail requested for %s", job.id)
        dialog = JobDetailDialog(job, self.data_manager, parent=self, settings=self.settings)
        dialog.exec()

    def on_jobs_rejected(self, count):
        details = ErrorMessages.INVALID_JOBS
        logger.warning("%d jobs were skipped during loading", count)
        self.title_label.setToolTip(f"{details['title']}: {count}")

    def show_error_message(self, title, message, suggestions=None):
        dialog = CustomMessageBox(parent=self, title=title, text=message, settings=self.settings,
                                  suggestions=suggestions)
        dialog.exec()

    def start(self):
        self.refresh_current_view()
        QTimer.singleShot(0, self.data_manager.load_jobs)

    def closeEvent(self, event):
        geometry = self.geometry()
        self.settings["window_geometry"] = [geometry.x(), geometry.y(), geometry.width(), geometry.height()]
        try:
            save_settings_safe(self.settings, preserve_keys=[])
        except SettingsError as e:
            logger.error("Window geometry not saved: %s", e)
        super().closeEvent(event)


def main():
    setup_logger()
    add_file_handler(ERROR_LOG_FILE)

    settings = load_settings()
    app = QApplication(sys.argv)

    if "user_timezone" not in settings:
        settings["user_timezone"] = get_timezone_from_ip()
        try:
            save_settings_safe(settings)
        except SettingsError as e:
            logger.error("Detected timezone not saved: %s", e)

    widget = MainWidget(settings)
    widget.show()
    widget.start()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
