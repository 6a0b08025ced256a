from __future__ import annotations

import pytest

from src.admin_dashboard.admin_dashboard.container import build_container
from src.admin_dashboard.admin_dashboard.core.exceptions import RecordNotFoundError
from src.admin_dashboard.admin_dashboard.pages import build_page_factories
from src.admin_dashboard.admin_dashboard.views import ViewRegistry


def make_workspace(seed=True):
    container = build_container(seed_demo_data=seed)
    return container.views, container.views.open()


def test_pages_are_built_on_first_entry_and_reused():
    _, (_, workspace) = make_workspace()

    assert not workspace.is_open("employees")
    employees = workspace.page("employees")

    assert workspace.is_open("employees")
    assert workspace.page("employees") is employees
    assert len(employees.store) == 1


def test_exit_discards_page_state():
    _, (_, workspace) = make_workspace()
    employees = workspace.page("employees")
    employees.delete("1")

    assert workspace.exit("employees") is True
    fresh = workspace.page("employees")

    assert fresh is not employees
    assert [e.key for e in fresh.store] == ["1"]
    assert workspace.exit("inventory") is False


def test_unseeded_pages_start_empty():
    _, (_, workspace) = make_workspace(seed=False)

    assert len(workspace.page("employees").store) == 0
    assert workspace.page("attendance").visible() == []


def test_job_titles_share_the_departments_page():
    _, (_, workspace) = make_workspace()

    assert workspace.page("job-titles") is workspace.page("departments").job_titles


def test_unknown_page():
    _, (_, workspace) = make_workspace()

    with pytest.raises(RecordNotFoundError):
        workspace.page("reports")


def test_registry_reuses_known_view_ids():
    views, (view_id, workspace) = make_workspace()

    assert views.open(view_id) == (view_id, workspace)
    other_id, other = views.open("stale-id")
    assert other_id != view_id and other is not workspace

    assert views.close(view_id) is True
    assert views.get(view_id) is None
    assert views.close(view_id) is False


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_idle_views_expire():
    clock = FakeClock()
    views = ViewRegistry(build_page_factories(seed_demo_data=True, max_upload_bytes=1024), idle_seconds=60, clock=clock)
    stale_id, _ = views.open()
    clock.now = 30
    busy_id, busy = views.open()

    clock.now = 70
    assert views.open(busy_id) == (busy_id, busy)

    assert views.get(stale_id) is None
    assert len(views) == 1


def test_access_keeps_a_view_alive():
    clock = FakeClock()
    views = ViewRegistry(build_page_factories(seed_demo_data=True, max_upload_bytes=1024), idle_seconds=60, clock=clock)
    view_id, workspace = views.open()

    for now in (50, 100, 150):
        clock.now = now
        assert views.open(view_id) == (view_id, workspace)


def test_registry_is_capped_least_recently_used_first():
    views = ViewRegistry(build_page_factories(seed_demo_data=True, max_upload_bytes=1024), max_views=2)
    first, _ = views.open()
    second, _ = views.open()
    views.open(first)

    views.open()

    assert len(views) == 2
    assert views.get(second) is None
    assert views.get(first) is not None


def test_exiting_job_titles_discards_them():
    _, (_, workspace) = make_workspace()
    departments = workspace.page("departments")
    departments.open_create()
    kitchen = departments.confirm({"name": "Kitchen"})
    jobs = workspace.page("job-titles")
    jobs.open_create()
    jobs.confirm({"name": "Chef", "department_key": kitchen.key})

    assert workspace.exit("job-titles") is True
    fresh = workspace.page("job-titles")

    assert fresh is not jobs
    assert len(fresh.store) == 0
    assert fresh is departments.job_titles
    assert len(departments.store) == 1


def test_exiting_departments_also_exits_job_titles():
    _, (_, workspace) = make_workspace()
    jobs = workspace.page("job-titles")

    workspace.exit("departments")

    assert not workspace.is_open("job-titles")
    assert workspace.page("job-titles") is not jobs
    assert workspace.page("job-titles") is workspace.page("departments").job_titles
