"""Tests for the named scenarios and the datasets they build.

Critical Invariants:
- An aliased target gains exactly one per pass, however many handles reach it
- Each independent target of the owned scenario gains one per pass
- Iteration scenarios bump every element once per pass
"""

import pytest

from ecsbench import Aliasing, BenchSettings, EntityId, get_scenario, scenarios_in_group
from ecsbench.bench.scenarios import ENTITY_GET, ENTITY_ITER, SCENARIOS

ALIASED = ["entity", "locked", "unchecked"]
ITERATION = ["entity_iter", "entity_for_each", "flat_iter", "flat_boxed_iter"]


@pytest.fixture(scope="module")
def full_settings() -> BenchSettings:
    return BenchSettings(entities_count=1000, points_count=10, max_workers=1)


def target_values(fixture) -> list[list[tuple[int, int]]]:
    return [[(p.x, p.y) for p in targets] for targets in fixture.resolved_targets()]


@pytest.mark.parametrize("name", ALIASED)
def test_aliased_targets_after_one_and_five_passes(name, full_settings):
    fixture = get_scenario(name).build(full_settings)

    fixture.run_pass()
    values = target_values(fixture)
    assert len(values) == 1000
    assert all(v == [(i + 1, i + 1)] * 10 for i, v in enumerate(values))

    for _ in range(4):
        fixture.run_pass()
    assert all(v == [(i + 5, i + 5)] * 10 for i, v in enumerate(target_values(fixture)))


@pytest.mark.parametrize("name", ALIASED)
def test_aliased_handles_reach_one_record(name, small_settings):
    fixture = get_scenario(name).build(small_settings)

    for targets in fixture.resolved_targets():
        assert len(targets) == small_settings.points_count
        assert all(t is targets[0] for t in targets)


def test_owned_targets_are_independent(small_settings):
    fixture = get_scenario("owned").build(small_settings)
    rounds = 3
    for _ in range(rounds):
        fixture.run_pass()

    k = small_settings.points_count
    for i, targets in enumerate(fixture.resolved_targets()):
        assert len({id(t) for t in targets}) == k
        assert all((t.x, t.y) == (i + rounds, i + rounds) for t in targets)
        assert sum(t.x - i for t in targets) == k * rounds


def test_unchecked_runs_without_leaking_claims(small_settings):
    fixture = get_scenario("unchecked").build(small_settings)
    fixture.run_pass()
    arena = fixture.resolver.arena
    assert arena.check_exclusive
    assert arena.active_writers() == 0


def test_unchecked_honours_disabled_assertions(small_settings):
    settings = small_settings.model_copy(update={"debug_assertions": False})
    fixture = get_scenario("unchecked").build(settings)
    assert not fixture.resolver.arena.check_exclusive


def test_mutation_scenarios_on_worker_threads(small_settings):
    settings = small_settings.model_copy(update={"max_workers": 4})
    for name in ALIASED + ["owned"]:
        fixture = get_scenario(name).build(settings)
        fixture.run_pass()
        first = fixture.resolved_targets()[0][0]
        assert (first.x, first.y) == (1, 1)


@pytest.mark.parametrize("name", ITERATION)
def test_iteration_scenarios_bump_every_element(name, small_settings):
    fixture = get_scenario(name).build(small_settings)
    fixture.run_pass()
    records = fixture.records()
    assert len(records) == small_settings.iter_entities_count
    assert all((p.x, p.y) == (i + 1, i + 1) for i, p in enumerate(records))


def test_flat_iteration_at_full_size():
    fixture = get_scenario("flat_iter").build(BenchSettings(iter_entities_count=100_000))
    fixture.run_pass()
    assert all((p.x, p.y) == (i + 1, i + 1) for i, p in enumerate(fixture.records()))


def test_aliasing_labels():
    assert get_scenario("owned").aliasing is Aliasing.INDEPENDENT
    for name in ALIASED:
        assert get_scenario(name).aliasing is Aliasing.ALIASED
    for name in ITERATION:
        assert get_scenario(name).aliasing is None


def test_groups():
    assert [s.name for s in scenarios_in_group(ENTITY_GET)] == ["entity", "owned"] + ALIASED[1:]
    assert [s.name for s in scenarios_in_group(ENTITY_ITER)] == ITERATION
    assert len(SCENARIOS) == 8


def test_unknown_names_raise_key_error():
    with pytest.raises(KeyError, match="Unknown scenario"):
        get_scenario("nope")
    with pytest.raises(KeyError, match="Unknown group"):
        scenarios_in_group("nope")


def test_entity_pass_hashes_only_for_lookups(small_settings, monkeypatch):
    """One column lookup per handle; aliasing is decided without hashing."""
    fixture = get_scenario("entity").build(small_settings)
    calls = []
    original_hash = EntityId.__hash__

    def counting_hash(self):
        calls.append(self)
        return original_hash(self)

    monkeypatch.setattr(EntityId, "__hash__", counting_hash)
    fixture.run_pass()
    monkeypatch.undo()

    assert len(calls) == small_settings.entities_count * small_settings.points_count
