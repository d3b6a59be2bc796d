import unittest
from unittest import mock

from pagectl import events
from pagectl._logging import reset_warnings
from pagectl.markers import MarkerKind
from pagectl.pagination import Pagination, PaginationConfig
from pagectl.quick_jump import KeyKind

P = MarkerKind.Page
JP = MarkerKind.JumpPrev
JN = MarkerKind.JumpNext


class TestScenarios(unittest.TestCase):
    def test_first_page(self):
        view = Pagination(PaginationConfig(total=500, page_size=10, default_current=1)).view()
        self.assertEqual(view.total_pages, 50)
        self.assertEqual(
            [m.key for m in view.markers],
            [(P, 1), (P, 2), (P, 3), (P, 4), (P, 5), (JN, 6), (P, 50)],
        )

    def test_middle_page(self):
        view = Pagination(PaginationConfig(total=500, default_current=25)).view()
        self.assertEqual(
            [m.page for m in view.markers if m.kind is P],
            [1, 23, 24, 25, 26, 27, 50],
        )
        kinds = [m.kind for m in view.markers]
        self.assertIn(JP, kinds)
        self.assertIn(JN, kinds)

    def test_few_pages(self):
        view = Pagination(PaginationConfig(total=25)).view()
        self.assertEqual(view.total_pages, 3)
        self.assertEqual([m.key for m in view.markers], [(P, 1), (P, 2), (P, 3)])

    def test_page_size_change(self):
        on_change = mock.Mock()
        on_show_size_change = mock.Mock()
        pagination = Pagination(PaginationConfig(
            total=500,
            default_current=50,
            on_change=on_change,
            on_show_size_change=on_show_size_change,
        ))
        self.assertEqual(pagination.on_page_size_select(20), 25)
        view = pagination.view()
        self.assertEqual(view.total_pages, 25)
        self.assertEqual(view.current, 25)
        self.assertEqual(view.page_size, 20)
        on_change.assert_called_once_with(25, 20)
        on_show_size_change.assert_called_once_with(25, 20)

    def test_non_numeric_quick_jump(self):
        on_change = mock.Mock()
        pagination = Pagination(PaginationConfig(total=500, default_current=3, on_change=on_change))
        pagination.on_quick_jump_key("5")
        self.assertEqual(pagination.on_quick_jump_key("abc", KeyKind.Enter), 3)
        self.assertEqual(pagination.view().quick_jump_value, 5)
        on_change.assert_not_called()


class TestView(unittest.TestCase):
    def test_defaults(self):
        view = Pagination().view()
        self.assertEqual(view.total_pages, 0)
        self.assertEqual(view.current, 1)
        self.assertEqual(view.page_size, 10)
        self.assertTrue(view.prev_disabled)
        self.assertTrue(view.next_disabled)
        self.assertEqual(view.item_range, (0, 0))
        self.assertEqual(len(view.markers), 1)
        self.assertTrue(view.markers[0].disabled)

    def test_prev_next(self):
        view = Pagination(PaginationConfig(total=500, default_current=1)).view()
        self.assertFalse(view.has_prev)
        self.assertTrue(view.has_next)
        self.assertTrue(view.prev_disabled)
        self.assertFalse(view.next_disabled)
        self.assertEqual(view.prev_page, 0)
        self.assertEqual(view.next_page, 2)

        view = Pagination(PaginationConfig(total=500, default_current=50)).view()
        self.assertTrue(view.has_prev)
        self.assertFalse(view.has_next)
        self.assertEqual(view.prev_page, 49)
        self.assertEqual(view.next_page, 50)

    def test_jump_pages(self):
        view = Pagination(PaginationConfig(total=500, default_current=25)).view()
        self.assertEqual((view.jump_prev_page, view.jump_next_page), (20, 30))
        view = Pagination(
            PaginationConfig(total=500, default_current=25, show_less_items=True)
        ).view()
        self.assertEqual((view.jump_prev_page, view.jump_next_page), (22, 28))

    def test_simple_next_disabled(self):
        view = Pagination(PaginationConfig(total=0, simple=True)).view()
        self.assertTrue(view.simple)
        self.assertTrue(view.next_disabled)
        self.assertTrue(view.prev_disabled)

    def test_hide_on_single_page(self):
        config = PaginationConfig(total=10, hide_on_single_page=True)
        self.assertTrue(Pagination(config).view().hidden)
        config = PaginationConfig(total=11, hide_on_single_page=True)
        self.assertFalse(Pagination(config).view().hidden)
        config = PaginationConfig(total=10)
        self.assertFalse(Pagination(config).view().hidden)

    def test_size_changer(self):
        self.assertFalse(Pagination(PaginationConfig(total=50)).view().show_size_changer)
        self.assertTrue(Pagination(PaginationConfig(total=51)).view().show_size_changer)
        self.assertFalse(
            Pagination(PaginationConfig(total=500, show_size_changer=False)).view().show_size_changer
        )
        self.assertFalse(
            Pagination(
                PaginationConfig(total=500, total_boundary_show_size_changer=1000)
            ).view().show_size_changer
        )

    def test_quick_jumper(self):
        config = PaginationConfig(total=10, show_quick_jumper=True)
        self.assertFalse(Pagination(config).view().show_quick_jumper)
        config = PaginationConfig(total=11, show_quick_jumper=True)
        self.assertTrue(Pagination(config).view().show_quick_jumper)

    def test_item_range(self):
        view = Pagination(PaginationConfig(total=25, default_current=3)).view()
        self.assertEqual(view.item_range, (21, 25))

        pagination = Pagination(PaginationConfig(total=500))
        pagination.on_page_size_select(0)
        self.assertEqual(pagination.view().total_pages, 0)
        self.assertEqual(pagination.view().item_range, (0, 0))

    def test_page_size_options(self):
        view = Pagination(PaginationConfig(total=500)).view()
        self.assertEqual(view.page_size_options, [10, 20, 50, 100])
        view = Pagination(PaginationConfig(total=500, default_page_size=30)).view()
        self.assertEqual(view.page_size_options, [10, 20, 30, 50, 100])
        view = Pagination(
            PaginationConfig(total=500, page_size_options=[5, 25], page_size=25)
        ).view()
        self.assertEqual(view.page_size_options, [5, 25])

    def test_view_is_recomputed(self):
        pagination = Pagination(PaginationConfig(total=500, default_current=25))
        self.assertEqual(pagination.view(), pagination.view())
        before = pagination.view()
        pagination.on_next_click()
        self.assertNotEqual(pagination.view(), before)
        self.assertEqual(before.current, 25)


class TestCallbacks(unittest.TestCase):
    def setUp(self):
        self.on_change = mock.Mock()
        self.pagination = Pagination(
            PaginationConfig(total=500, default_current=25, on_change=self.on_change)
        )

    def test_clicks(self):
        expected_results = [
            (self.pagination.on_next_click, (), 26),
            (self.pagination.on_prev_click, (), 25),
            (self.pagination.on_jump_next_click, (), 30),
            (self.pagination.on_jump_prev_click, (), 25),
            (self.pagination.on_page_click, (12,), 12),
            (self.pagination.on_page_click, (12,), 12),
        ]
        for callback, args, expected in expected_results:
            self.assertEqual(callback(*args), expected)
            self.assertEqual(self.pagination.current, expected)
        self.assertEqual(self.on_change.call_count, 5)

    def test_quick_jump(self):
        self.pagination.on_quick_jump_key("4", KeyKind.Other)
        self.assertEqual(self.pagination.view().quick_jump_value, 4)
        self.assertEqual(self.pagination.on_quick_jump_confirm(), 4)
        self.assertEqual(self.pagination.on_quick_jump_blur("60"), 50)
        self.assertEqual(self.pagination.view().quick_jump_value, 50)

    def test_dispatch(self):
        self.assertEqual(self.pagination.dispatch(events.NextPage()), 26)
        self.on_change.assert_called_once_with(26, 10)


class TestControlled(unittest.TestCase):
    def test_host_owns_current(self):
        host = {"current": 5}

        def on_change(page, page_size):
            host["current"] = page

        pagination = Pagination(PaginationConfig(total=500, current=5, on_change=on_change))
        pagination.on_next_click()
        self.assertEqual(pagination.current, 5)
        self.assertEqual(host["current"], 6)

        pagination.update_with(current=host["current"])
        self.assertEqual(pagination.current, 6)
        self.assertEqual(pagination.view().current, 6)

    def test_read_only_without_handler(self):
        reset_warnings()
        with self.assertLogs("pagectl.state", level="WARNING"):
            pagination = Pagination(PaginationConfig(total=500, current=7))
        pagination.on_next_click()
        self.assertEqual(pagination.current, 7)

    def test_same_behaviour_either_way(self):
        seen = []
        internal = Pagination(PaginationConfig(total=500, on_change=lambda p, s: None))
        controlled = Pagination(PaginationConfig(
            total=500, current=1, on_change=lambda p, s: seen.append(p)
        ))
        actions = ["on_next_click", "on_jump_next_click", "on_jump_next_click", "on_prev_click"]
        for action in actions:
            getattr(internal, action)()
            getattr(controlled, action)()
            controlled.update_with(current=seen[-1])
            self.assertEqual(internal.view().markers, controlled.view().markers)

    def test_total_shrinks(self):
        pagination = Pagination(PaginationConfig(total=500, default_current=50))
        pagination.update_with(total=120)
        self.assertEqual(pagination.current, 12)
        self.assertEqual(pagination.view().markers[-1].page, 12)

    def test_host_owns_page_size(self):
        on_change = mock.Mock()
        pagination = Pagination(PaginationConfig(
            total=500, page_size=10, default_current=50, on_change=on_change
        ))
        self.assertEqual(pagination.on_page_size_select(20), 25)
        on_change.assert_called_once_with(25, 20)
        view = pagination.view()
        self.assertEqual((view.page_size, view.total_pages, view.current), (10, 50, 50))

        pagination.update(pagination.config)
        self.assertEqual(pagination.current, 50)

        pagination.update_with(page_size=20)
        view = pagination.view()
        self.assertEqual((view.page_size, view.total_pages, view.current), (20, 25, 25))
