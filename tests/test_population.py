"""Tests for Objective, EvaluationData, Individual and Population.

This module tests the data model the rankers consume:
- Test behavior, not implementation
- Each test should fail for one reason
- Assert both exception type and message fragment for error tests
"""

import math

import pytest

from front_rank import (
    EvaluationData,
    Individual,
    Objective,
    ObjectiveMismatchError,
    Population,
    RankingResult,
    nsga2_ranker,
)


class TestObjective:
    """Tests for Objective construction."""

    def test_hashable_and_equal_by_value(self) -> None:
        """Objectives with the same fields are interchangeable keys."""
        assert {Objective("f1"): 1.0}[Objective("f1")] == 1.0

    def test_range_normalized_to_floats(self) -> None:
        """Range is stored as a float pair."""
        assert Objective("f1", range=(0, 1)).range == (0.0, 1.0)

    def test_rejects_inverted_range(self) -> None:
        """Low bound above high bound is rejected."""
        with pytest.raises(ValueError, match="range low"):
            Objective("f1", range=(2.0, 1.0))

    def test_rejects_non_string_name(self) -> None:
        """Name must be a string."""
        with pytest.raises(TypeError, match="name must be a string"):
            Objective(3)


class TestEvaluationData:
    """Tests for EvaluationData."""

    def test_separates_fitness_and_performance(self) -> None:
        """Performance indicators are kept out of fitness results."""
        fit = Objective("fit")
        perf = Objective("perf", is_performance_indicator=True)
        data = EvaluationData()
        data.set_result(fit, 1)
        data.set_result(perf, 2.5)

        assert dict(data.fitness_results) == {fit: 1.0}
        assert dict(data.performance_results) == {perf: 2.5}
        assert len(data) == 2

    def test_rejects_duplicate_result(self) -> None:
        """A result can only be set once per objective."""
        fit = Objective("fit")
        data = EvaluationData()
        data.set_result(fit, 1.0)
        with pytest.raises(ValueError, match="already been set for objective 'fit'"):
            data.set_result(fit, 2.0)

    def test_rejects_non_objective_key(self) -> None:
        """Keys must be Objective instances."""
        with pytest.raises(TypeError, match="objective must be an Objective"):
            EvaluationData().set_result("fit", 1.0)

    def test_get_result_unknown_objective(self) -> None:
        """Unknown objectives raise KeyError."""
        with pytest.raises(KeyError, match="no result recorded"):
            EvaluationData().get_result(Objective("missing"))

    def test_views_are_read_only(self) -> None:
        """Result mappings cannot be modified."""
        data = EvaluationData()
        with pytest.raises(TypeError):
            data.results[Objective("f1")] = 1.0

    def test_clear(self) -> None:
        """clear() removes every result."""
        data = EvaluationData()
        data.set_result(Objective("f1"), 1.0)
        data.clear()
        assert len(data) == 0
        assert len(data.fitness_results) == 0


class TestIndividual:
    """Tests for Individual identity and ordering."""

    def test_ids_are_unique_and_increasing(self) -> None:
        """Ids come from a counter and are never reused."""
        first, second, third = Individual(), Individual(), Individual()
        assert first.id < second.id < third.id

    def test_ordered_by_id(self) -> None:
        """Individuals sort by creation order."""
        first, second = Individual(), Individual()
        assert sorted([second, first]) == [first, second]

    def test_equality_is_identity(self) -> None:
        """Two individuals with equal results are still distinct."""
        f1 = Objective("f1")
        assert Individual.from_results({f1: 1.0}) != Individual.from_results({f1: 1.0})

    def test_from_results(self) -> None:
        """from_results records every result."""
        f1 = Objective("f1")
        ind = Individual.from_results({f1: 0.25}, genotype=[1, 2])
        assert ind.evaluation_data.get_result(f1) == 0.25
        assert ind.genotype == [1, 2]
        assert ind.rank is None

    def test_is_evaluated(self) -> None:
        """is_evaluated reflects whether any result is present."""
        assert Individual().is_evaluated is False
        assert Individual.from_results({Objective("f1"): 1.0}).is_evaluated is True


class TestPopulation:
    """Tests for Population."""

    def test_members_in_id_order(self, scenario: dict[str, Individual]) -> None:
        """Members are returned in ascending id order regardless of insertion."""
        pop = Population(reversed(list(scenario.values())))
        assert pop.members == tuple(scenario.values())
        assert list(pop) == list(scenario.values())
        assert len(pop) == 4

    def test_rank_with_default_ranker(self, scenario: dict[str, Individual]) -> None:
        """Default ranker is NSGA-II and the fittest individual is recorded."""
        pop = Population(scenario.values())
        result = pop.rank()

        assert isinstance(result, RankingResult)
        assert pop.fittest is scenario["A"]
        assert scenario["D"].rank == 0

    def test_rank_with_named_ranker(self, f1: Objective, make_individuals) -> None:
        """A registered ranker can be selected by name."""
        members = make_individuals([f1], [(1.0,), (3.0,)])
        pop = Population(members, ranker="simple")
        pop.rank()
        assert pop.fittest is members[1]

    def test_rank_with_callable_ranker(self, scenario: dict[str, Individual]) -> None:
        """A Ranker callable can be passed directly."""
        calls = []
        inner = nsga2_ranker()

        def ranker(individuals):
            calls.append(len(individuals))
            return inner(individuals)

        Population(scenario.values(), ranker=ranker).rank()
        assert calls == [4]

    def test_unknown_ranker_name(self) -> None:
        """Unknown ranker names raise KeyError listing available ones."""
        with pytest.raises(KeyError, match="Available rankers: .*nsga2"):
            Population(ranker="missing")

    def test_callback_receives_result(self, scenario: dict[str, Individual]) -> None:
        """The callback is called once with the ranking result."""
        received = []
        result = Population(scenario.values()).rank(callback=received.append)
        assert received == [result]

    def test_best_performing(self, f1: Objective) -> None:
        """best_performing uses the first performance indicator, skipping NaN."""
        perf = Objective("perf", is_performance_indicator=True)
        failed = Individual.from_results({f1: 1.0, perf: math.nan})
        low = Individual.from_results({f1: 2.0, perf: 0.1})
        high = Individual.from_results({f1: 0.0, perf: 0.9})

        pop = Population([failed, low, high])
        pop.rank()

        assert pop.fittest is low
        assert pop.best_performing is high

    def test_best_performing_none_without_indicator(self, scenario: dict[str, Individual]) -> None:
        """Without performance indicators best_performing stays None."""
        pop = Population(scenario.values())
        pop.rank()
        assert pop.best_performing is None

    def test_failed_rank_clears_fittest(self, f1: Objective, f2: Objective) -> None:
        """A ranking error leaves no stale fittest behind."""
        pop = Population([Individual.from_results({f1: 1.0, f2: 1.0})])
        pop.rank()
        assert pop.fittest is not None

        pop.add(Individual.from_results({f1: 1.0}))
        with pytest.raises(ObjectiveMismatchError):
            pop.rank()
        assert pop.fittest is None

    def test_add_rejects_duplicates(self) -> None:
        """The same individual cannot be added twice."""
        ind = Individual()
        pop = Population([ind])
        with pytest.raises(ValueError, match=f"individual {ind.id} is already"):
            pop.add(ind)

    def test_add_rejects_non_individual(self) -> None:
        """Only Individuals can be added."""
        with pytest.raises(TypeError, match="must be an Individual"):
            Population().add("not an individual")

    def test_remove_and_lookup(self, scenario: dict[str, Individual]) -> None:
        """Removed individuals can no longer be looked up."""
        pop = Population(scenario.values())
        c = scenario["C"]
        assert pop.get_individual(c.id) is c

        pop.remove(c)
        assert c not in pop
        with pytest.raises(KeyError, match=f"no individual with id {c.id}"):
            pop.get_individual(c.id)
        with pytest.raises(KeyError, match="is not in the population"):
            pop.remove(c)

    def test_remove_fittest_clears_reference(self, scenario: dict[str, Individual]) -> None:
        """Removing the fittest individual clears the fittest reference."""
        pop = Population(scenario.values())
        pop.rank()
        pop.remove(scenario["A"])
        assert pop.fittest is None

    def test_empty_population_ranks(self) -> None:
        """An empty population ranks without error."""
        pop = Population()
        result = pop.rank()
        assert result.n_individuals == 0
        assert pop.fittest is None
