import unittest
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from constants import TimeGridLayout
from views.month_view import grid_cell_rects
from views.time_grid_view import block_rect, column_positions
from views.widgets import fit_chips, get_text_color_for_background
from views.year_view import card_rects

class TestTimeGridGeometry(unittest.TestCase):

    def test_block_uses_hour_height_minus_gap(self):
        rect = block_rect(100, 200, top_offset=9, height=2, hour_height=64)
        self.assertEqual(rect.y(), 9 * 64)
        self.assertEqual(rect.height(), 2 * 64 - TimeGridLayout.BLOCK_GAP)
        self.assertEqual(rect.x(), 100 + TimeGridLayout.BLOCK_MARGIN)

    def test_tiny_block_keeps_a_pixel(self):
        rect = block_rect(0, 100, top_offset=0, height=0.05, hour_height=64)
        self.assertEqual(rect.height(), 1)

    def test_column_positions_fill_width(self):
        positions = column_positions(64 + 703, 7)
        self.assertEqual(len(positions), 8)
        self.assertEqual(positions[0], TimeGridLayout.TIME_GUTTER_WIDTH)
        self.assertEqual(positions[-1], 64 + 703)

    def test_grid_and_cards(self):
        self.assertEqual(len(grid_cell_rects(700, 600, 6, top=28)), 42)
        cards = card_rects(800, 600, 12)
        self.assertEqual(len(cards), 12)
        # four per row
        self.assertEqual(cards[0].y(), cards[3].y())
        self.assertLess(cards[3].y(), cards[4].y())

    def test_text_color(self):
        self.assertEqual(get_text_color_for_background("#FFFFFF"), "#000000")
        self.assertEqual(get_text_color_for_background("#1E3A8A"), "#FFFFFF")
        self.assertEqual(get_text_color_for_background(None), "#FFFFFF")


class TestChipFitting(unittest.TestCase):
    # 18 px chips with 2 px spacing: one row per 20 px

    def test_everything_fits(self):
        self.assertEqual(fit_chips(0, 100, 3, 0, 18, 2), (3, 0))
        self.assertEqual(fit_chips(0, 38, 2, 0, 18, 2), (2, 0))

    def test_capped_jobs_keep_their_count(self):
        self.assertEqual(fit_chips(0, 100, 3, 2, 18, 2), (3, 2))

    def test_chips_that_do_not_fit_are_counted_as_more(self):
        # two rows: one chip plus the "+K more" label
        self.assertEqual(fit_chips(0, 50, 3, 0, 18, 2), (1, 2))
        self.assertEqual(fit_chips(0, 50, 3, 4, 18, 2), (1, 6))
        self.assertEqual(fit_chips(0, 10, 3, 1, 18, 2), (0, 4))

    def test_no_job_goes_missing(self):
        for limit in range(0, 130, 7):
            for count in range(0, 6):
                for hidden in (0, 3):
                    drawn, more = fit_chips(30, 30 + limit, count, hidden, 18, 2)
                    self.assertEqual(drawn + more, count + hidden)
                    self.assertLessEqual(drawn, count)


if __name__ == '__main__':
    unittest.main()
