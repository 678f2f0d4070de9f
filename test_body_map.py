import unittest
from body_areas import get_catalog
from body_map import (
    BodyMapPointer,
    clamp_percentage,
    fraction_from_offset,
    map_position,
    parse_direct_input,
    resolve_click,
)
from models import UnknownRegionError
from session import BurnSession


class TestCoordinateMapper(unittest.TestCase):

    def setUp(self):
        self.child = get_catalog(3)
        self.adult = get_catalog(30)

    def test_01_proportional_mapping(self):
        """Half-way across a 4.5% head face reads 2.3% (2.25 rounded half up)."""
        self.assertEqual(map_position("head_anterior", 0.5, self.adult), 2.3)
        self.assertEqual(map_position("head_anterior", 1.0, self.adult), 4.5)
        self.assertEqual(map_position("head_anterior", 0.0, self.adult), 0.0)
        self.assertEqual(map_position("right_thigh_anterior", 0.4, self.child), 1.5)

    def test_02_output_stays_within_reference(self):
        """[CLAMP] Every fraction in [0,1] maps into [0, reference_max]."""
        for catalog in (self.child, self.adult):
            for key in catalog.keys():
                reference_max = catalog.reference_max(key)
                for step in range(0, 101):
                    value = map_position(key, step / 100.0, catalog)
                    self.assertGreaterEqual(value, 0.0)
                    self.assertLessEqual(value, reference_max)

    def test_03_out_of_range_fraction(self):
        self.assertEqual(map_position("head_anterior", 1.7, self.adult), 4.5)
        self.assertEqual(map_position("head_anterior", -0.3, self.adult), 0.0)
        self.assertEqual(map_position("head_anterior", float("nan"), self.adult), 0.0)

    def test_04_unknown_region(self):
        with self.assertRaises(UnknownRegionError):
            map_position("head_anterior", 0.5, self.child)

    def test_05_offset_to_fraction(self):
        self.assertEqual(fraction_from_offset(50, 200), 0.25)
        self.assertEqual(fraction_from_offset(-10, 200), 0.0)
        self.assertEqual(fraction_from_offset(250, 200), 1.0)
        self.assertEqual(fraction_from_offset(50, 0), 0.0)


class TestCommitRules(unittest.TestCase):

    def test_01_toggle_law(self):
        """Clicking within 0.1 of the committed value deselects the region."""
        for v in (0.5, 1.2, 2.3, 4.5):
            self.assertEqual(resolve_click(v, v + 0.05, 4.5), 0.0)
            self.assertEqual(resolve_click(v, v - 0.05, 4.5), 0.0)
            self.assertEqual(resolve_click(v, v, 4.5), 0.0)

    def test_02_new_position_commits(self):
        self.assertEqual(resolve_click(0.0, 2.3, 4.5), 2.3)
        self.assertEqual(resolve_click(1.0, 3.0, 4.5), 3.0)

    def test_03_commit_never_exceeds_reference(self):
        self.assertEqual(resolve_click(0.0, 6.0, 4.5), 4.5)

    def test_04_direct_input_parsing(self):
        self.assertEqual(parse_direct_input("3.5"), 3.5)
        self.assertEqual(parse_direct_input(" 2"), 2.0)
        self.assertEqual(parse_direct_input("1.5%"), 1.5)
        self.assertEqual(parse_direct_input(".5"), 0.5)
        self.assertEqual(parse_direct_input(""), 0.0)
        self.assertEqual(parse_direct_input("abc"), 0.0)
        self.assertEqual(parse_direct_input(None), 0.0)
        self.assertEqual(parse_direct_input("NaN"), 0.0)
        self.assertEqual(parse_direct_input(float("inf")), 0.0)
        self.assertEqual(parse_direct_input(7), 7.0)
        self.assertEqual(parse_direct_input("-2"), -2.0)

    def test_05_clamp(self):
        self.assertEqual(clamp_percentage(-2, 4.5), 0.0)
        self.assertEqual(clamp_percentage(9, 4.5), 4.5)
        self.assertEqual(clamp_percentage(3.2, 4.5), 3.2)

    def test_06_neighbouring_step_commits(self):
        """[TOGGLE] A gap of exactly one 0.1 step sets the new value."""
        self.assertEqual(resolve_click(0.3, 0.2, 4.5), 0.2)
        self.assertEqual(resolve_click(1.2, 1.1, 4.5), 1.1)
        for tenths in range(0, 45):
            low, high = tenths / 10.0, (tenths + 1) / 10.0
            self.assertEqual(resolve_click(low, high, 4.5), high, msg=(low, high))
            self.assertEqual(resolve_click(high, low, 4.5), low, msg=(high, low))


class TestBodyMapPointer(unittest.TestCase):

    def setUp(self):
        self.session = BurnSession()
        self.session.set_patient_field("age", 30)
        self.pointer = BodyMapPointer(self.session)

    def test_01_move_previews_without_committing(self):
        preview = self.pointer.move("torso_left_anterior", 0.5)
        self.assertEqual(preview, 2.3)
        self.assertEqual(self.pointer.display_value("torso_left_anterior"), 2.3)
        self.assertEqual(self.session.values["torso_left_anterior"], 0.0)

    def test_02_click_commits_preview(self):
        self.pointer.move("torso_left_anterior", 1.0)
        committed = self.pointer.click("torso_left_anterior")
        self.assertEqual(committed, 4.5)
        self.assertEqual(self.session.values["torso_left_anterior"], 4.5)

    def test_03_second_click_same_spot_deselects(self):
        self.pointer.move("head_posterior", 0.6)
        self.pointer.click("head_posterior")
        self.pointer.move("head_posterior", 0.6)
        self.assertEqual(self.pointer.click("head_posterior"), 0.0)
        self.assertEqual(self.session.total_bsa(), 0.0)

    def test_04_stale_click_after_leave(self):
        """[EVENTS] Leaving clears the preview; a later click commits nothing."""
        self.pointer.move("right_thigh_anterior", 0.8)
        self.pointer.leave()
        self.assertIsNone(self.pointer.hovered_key)
        self.assertEqual(self.pointer.hovered_value, 0.0)
        self.assertIsNone(self.pointer.click("right_thigh_anterior"))
        self.assertEqual(self.session.values["right_thigh_anterior"], 0.0)

    def test_05_click_on_other_region_is_ignored(self):
        self.pointer.move("right_thigh_anterior", 0.8)
        self.assertIsNone(self.pointer.click("left_thigh_anterior"))
        self.assertEqual(self.session.total_bsa(), 0.0)

    def test_06_display_value_falls_back_to_committed(self):
        self.session.commit_direct_input("head_anterior", "3")
        self.assertEqual(self.pointer.display_value("head_anterior"), 3.0)

    def test_07_moving_one_step_and_clicking(self):
        self.assertEqual(self.pointer.move("torso_left_anterior", 1.2 / 4.5), 1.2)
        self.assertEqual(self.pointer.click("torso_left_anterior"), 1.2)
        self.assertEqual(self.pointer.move("torso_left_anterior", 1.1 / 4.5), 1.1)
        self.assertEqual(self.pointer.click("torso_left_anterior"), 1.1)
        self.assertEqual(self.session.values["torso_left_anterior"], 1.1)

    def test_08_preview_from_previous_age_is_discarded(self):
        """A preview mapped before an age change never commits."""
        self.pointer.move("head_anterior", 1.0)
        self.session.set_patient_field("age", 6)
        self.assertIsNone(self.pointer.click("head_anterior"))
        self.assertIsNone(self.pointer.hovered_key)
        self.assertEqual(self.session.total_bsa(), 0.0)

        # Same key space, different maximum
        self.session.set_patient_field("age", 0.5)
        self.pointer.move("head_left_anterior", 1.0)
        self.session.set_patient_field("age", 7)
        self.assertIsNone(self.pointer.click("head_left_anterior"))
        self.assertEqual(self.pointer.display_value("head_left_anterior"), 0.0)
        self.assertEqual(self.session.values["head_left_anterior"], 0.0)


if __name__ == '__main__':
    unittest.main()
