"""
Tests of the in-memory project store
"""
from datetime import datetime, timedelta

import pytest

from roomload import compute_loads
from roomload.projects import ProjectStore, DEFAULT_EXPIRY


class FakeClock:

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 5, 1, 9, 0))


@pytest.fixture
def scenario_a_results(scenario_a_inputs, simple_settings):
    return compute_loads(scenario_a_inputs, simple_settings)


class TestProjectStore:

    def test_save_and_get(self, clock, scenario_a_inputs, scenario_a_results):
        store = ProjectStore(clock=clock)
        project = store.save('  Office 1 ', scenario_a_inputs, scenario_a_results)
        assert project.name == 'Office 1'
        assert project.expires_at == clock.now + DEFAULT_EXPIRY
        assert store.get(project.id) is project
        assert len(store) == 1

    def test_blank_name_is_rejected(self, clock, scenario_a_inputs, scenario_a_results):
        store = ProjectStore(clock=clock)
        with pytest.raises(ValueError):
            store.save('   ', scenario_a_inputs, scenario_a_results)

    def test_project_expires(self, clock, scenario_a_inputs, scenario_a_results):
        store = ProjectStore(clock=clock)
        project = store.save('Office 1', scenario_a_inputs, scenario_a_results)
        clock.advance(minutes=29)
        assert store.get(project.id) is not None
        clock.advance(minutes=1)
        assert store.get(project.id) is None
        assert len(store) == 0

    def test_no_expiry(self, clock, scenario_a_inputs, scenario_a_results):
        store = ProjectStore(expiry=None, clock=clock)
        project = store.save('Office 1', scenario_a_inputs, scenario_a_results)
        clock.advance(days=365)
        assert store.get(project.id) is project

    def test_list_newest_first(self, clock, scenario_a_inputs, scenario_a_results):
        store = ProjectStore(clock=clock)
        first = store.save('first', scenario_a_inputs, scenario_a_results)
        clock.advance(minutes=20)
        second = store.save('second', scenario_a_inputs, scenario_a_results)
        assert store.list() == [second, first]
        clock.advance(minutes=15)
        assert store.list() == [second]

    def test_purge_expired(self, clock, scenario_a_inputs, scenario_a_results):
        store = ProjectStore(clock=clock)
        for name in ('a', 'b', 'c'):
            store.save(name, scenario_a_inputs, scenario_a_results)
        clock.advance(hours=1)
        assert store.purge_expired() == 3
        assert store.purge_expired() == 0

    def test_delete(self, clock, scenario_a_inputs, scenario_a_results):
        store = ProjectStore(clock=clock)
        project = store.save('Office 1', scenario_a_inputs, scenario_a_results)
        assert store.delete(project.id)
        assert not store.delete(project.id)
        assert store.get(project.id) is None
