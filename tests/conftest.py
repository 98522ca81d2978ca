import pytest
from loguru import logger

from search_filters.catalog.models import FilterCatalog, FilterGroup, FilterItem, ItemKind
from search_filters.selection.controller import SearchFilterController
from search_filters.ui.headless import HeadlessFilterUiBuilder


class Ids:
    """Filter ids of the video service test catalog."""
    # content filters
    MAIN_GRP = 1000
    ALL = 1
    VIDEOS = 2
    CHANNELS = 3
    PLAYLISTS = 4
    SEPIA_GRP = 1100
    SEPIA_SEARCH = 5

    # sort filters
    SORT_GRP = 2000
    SORT_BY_RELEVANCE = 2001
    SORT_BY_CREATION_DATE = 2002
    SORT_BY_DURATION = 2003
    SORT_BY_VIEWS = 2004
    ORDER_GRP = 2100
    ORDER_ASC = 2101
    ORDER_DESC = 2102
    FEATURES_GRP = 2200
    FEATURES_3D = 2201
    FEATURES_4K = 2202
    FEATURES_HD = 2203
    FEATURES_DIVIDER = 2209


def build_video_catalog() -> FilterCatalog:
    """
    Catalog modelled on a video platform.

    - "all" and "videos" offer every sort filter
    - "channels" only offers two sort-by options
    - "playlists" has no sort filters
    - "sepia search" (non-exclusive) only offers the sort order group
    """
    sort_group = FilterGroup(
        id=Ids.SORT_GRP,
        name_key="sort_by",
        exclusive=True,
        default_item_id=Ids.SORT_BY_RELEVANCE,
        items=[
            FilterItem(id=Ids.SORT_BY_RELEVANCE, name_key="relevance"),
            FilterItem(id=Ids.SORT_BY_CREATION_DATE, name_key="creation_date"),
            FilterItem(id=Ids.SORT_BY_DURATION, name_key="duration"),
            FilterItem(id=Ids.SORT_BY_VIEWS, name_key="views"),
        ],
    )
    order_group = FilterGroup(
        id=Ids.ORDER_GRP,
        name_key="order",
        exclusive=True,
        default_item_id=Ids.ORDER_ASC,
        items=[
            FilterItem(id=Ids.ORDER_ASC, name_key="ascending"),
            FilterItem(id=Ids.ORDER_DESC, name_key="descending"),
        ],
    )
    features_group = FilterGroup(
        id=Ids.FEATURES_GRP,
        name_key="features",
        exclusive=False,
        items=[
            FilterItem(id=Ids.FEATURES_3D, name_key="3d"),
            FilterItem(id=Ids.FEATURES_4K, name_key="4k"),
            FilterItem(id=Ids.FEATURES_DIVIDER, name_key="more", kind=ItemKind.DIVIDER),
            FilterItem(id=Ids.FEATURES_HD, name_key="hd"),
        ],
    )
    superset = FilterCatalog(groups=[sort_group, order_group, features_group])

    channels_variant = FilterCatalog(groups=[
        FilterGroup(
            id=Ids.SORT_GRP,
            name_key="sort_by",
            exclusive=True,
            default_item_id=Ids.SORT_BY_RELEVANCE,
            items=[
                FilterItem(id=Ids.SORT_BY_RELEVANCE, name_key="relevance"),
                FilterItem(id=Ids.SORT_BY_CREATION_DATE, name_key="creation_date"),
            ],
        ),
    ])
    sepia_variant = FilterCatalog(groups=[order_group])

    main_group = FilterGroup(
        id=Ids.MAIN_GRP,
        name_key="main",
        exclusive=True,
        default_item_id=Ids.ALL,
        sort_catalog=superset,
        items=[
            FilterItem(id=Ids.ALL, name_key="all"),
            FilterItem(id=Ids.VIDEOS, name_key="videos"),
            FilterItem(id=Ids.CHANNELS, name_key="channels"),
            FilterItem(id=Ids.PLAYLISTS, name_key="playlists"),
        ],
    )
    sepia_group = FilterGroup(
        id=Ids.SEPIA_GRP,
        name_key="sepia",
        exclusive=False,
        sort_catalog=superset,
        items=[FilterItem(id=Ids.SEPIA_SEARCH, name_key="sepia_search")],
    )

    return FilterCatalog(
        groups=[main_group, sepia_group],
        sort_variants={
            Ids.ALL: superset,
            Ids.VIDEOS: superset,
            Ids.CHANNELS: channels_variant,
            Ids.SEPIA_SEARCH: sepia_variant,
        },
    )


@pytest.fixture
def ids():
    return Ids


@pytest.fixture
def catalog():
    return build_video_catalog()


@pytest.fixture
def controller(catalog):
    return SearchFilterController(catalog)


@pytest.fixture
def bound_controller(catalog):
    """Controller with headless content and sort UIs attached."""
    controller = SearchFilterController(catalog)
    content_ui = HeadlessFilterUiBuilder(controller.add_content_filter_ui_wrapper)
    sort_ui = HeadlessFilterUiBuilder(controller.add_sort_filter_ui_wrapper)
    controller.create_search_ui(content_ui, sort_ui)
    return controller, content_ui, sort_ui


@pytest.fixture
def caplog_loguru(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level="DEBUG")
    yield caplog
    logger.remove(handler_id)
