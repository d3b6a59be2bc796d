import pydantic


class Locale(pydantic.BaseModel):
    items_per_page: str
    jump_to: str
    page: str
    prev_page: str
    next_page: str
    prev_5: str
    next_5: str
    prev_3: str
    next_3: str
    page_size: str


EN_US = Locale(
    items_per_page="/ page",
    jump_to="Go to",
    page="Page",
    prev_page="Previous Page",
    next_page="Next Page",
    prev_5="Previous 5 Pages",
    next_5="Next 5 Pages",
    prev_3="Previous 3 Pages",
    next_3="Next 3 Pages",
    page_size="Page Size",
)


ZH_CN = Locale(
    items_per_page="条/页",
    jump_to="跳至",
    page="页",
    prev_page="上一页",
    next_page="下一页",
    prev_5="向前 5 页",
    next_5="向后 5 页",
    prev_3="向前 3 页",
    next_3="向后 3 页",
    page_size="页码",
)


LOCALES = {
    "en_US": EN_US,
    "zh_CN": ZH_CN,
}
