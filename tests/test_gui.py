import unittest

from pagectl import events
from pagectl.gui import prompt_label
from pagectl.locales import EN_US, ZH_CN
from pagectl.pagination import Pagination, PaginationConfig


class TestPromptLabel(unittest.TestCase):
    def test_labels(self):
        pagination = Pagination(PaginationConfig(total=500, default_page_size=30))
        expected_results = [
            (events.RequestInput(kind=events.JumpToPage), EN_US, "Go to: "),
            (events.RequestInput(kind=events.SetPageSize), EN_US, "Page Size (10/20/30/50/100): "),
            (events.RequestInput(kind=events.JumpToPage), ZH_CN, "跳至: "),
        ]
        for request, locale, expected in expected_results:
            self.assertEqual(prompt_label(request, pagination, locale), expected)
