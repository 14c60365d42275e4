"""
Unit tests for player state snapshots and transitions.
"""
from dataclasses import replace

import pytest

from black_trigram.core.game_enums import (
    CombatReadiness,
    EffectIntensity,
    EffectType,
    PlayerArchetype,
    TrigramStance,
)
from black_trigram.game.catalog.effects import effect
from black_trigram.game.catalog.stances import stance_change_cost
from black_trigram.game.entities.player_state import (
    apply_damage,
    can_act,
    change_stance,
    clamp_player,
    combat_effectiveness,
    consume_resources,
    create_player,
    is_defeated,
    readiness_for,
    regenerate_resources,
)
from black_trigram.game.entities.status_effects import materialize
from tests.test_utils import PlayerBuilder, assert_within_bounds


class TestCreatePlayer:
    """Test archetype-based construction."""

    def test_from_archetype(self):
        player = create_player(PlayerArchetype.AMSALJA, 1)
        assert player.id == "player_1"
        assert player.name.english == "Stealth"
        assert player.stance == TrigramStance.SON
        assert player.health == player.max_health == 80
        assert player.ki == player.max_ki == 120
        assert player.technique_skill == 90
        assert player.readiness == CombatReadiness.READY

    def test_explicit_id_and_stance(self):
        player = create_player(PlayerArchetype.MUSA, player_id="p1", stance=TrigramStance.GAN)
        assert player.id == "p1"
        assert player.stance == TrigramStance.GAN

    def test_frozen(self, musa):
        with pytest.raises(AttributeError):
            musa.health = 0  # type: ignore[misc]


class TestReadiness:
    """Test readiness tiers from health fraction."""

    @pytest.mark.parametrize("health,expected", [
        (100, CombatReadiness.READY),
        (80, CombatReadiness.READY),
        (79, CombatReadiness.LIGHT),
        (60, CombatReadiness.LIGHT),
        (45, CombatReadiness.MODERATE),
        (25, CombatReadiness.HEAVY),
        (5, CombatReadiness.CRITICAL),
        (0, CombatReadiness.INCAPACITATED),
    ])
    def test_tiers(self, health, expected):
        assert readiness_for(health, 100) == expected


class TestApplyDamage:
    """Test the health transition helper."""

    def test_damage_side_effects(self, musa):
        hurt = apply_damage(musa, -20)
        assert hurt.health == musa.health - 20
        assert hurt.pain == 10
        assert hurt.blood_loss == pytest.approx(2.0)

    def test_vital_point_bleeds_more(self, musa):
        hurt = apply_damage(musa, -20, vital_point_strike=True)
        assert hurt.blood_loss == pytest.approx(6.0)

    def test_healing_only_restores_health(self, musa):
        hurt = apply_damage(musa, -60)
        healed = apply_damage(hurt, 30)
        assert healed.health == hurt.health + 30
        assert healed.pain == hurt.pain
        assert healed.blood_loss == hurt.blood_loss
        assert healed.readiness == readiness_for(healed.health, healed.max_health)

    def test_zero_delta_idempotent(self, musa):
        once = apply_damage(musa, 0)
        assert apply_damage(once, 0) == once == musa

    @pytest.mark.parametrize("delta", [-1, -15, -500, 1, 50, 500])
    def test_monotonic_and_clamped(self, delta):
        player = PlayerBuilder().with_health(60).build()
        after = apply_damage(player, delta)
        if delta < 0:
            assert after.health < player.health
        else:
            assert after.health > player.health
        assert_within_bounds(after)

    def test_readiness_recomputed(self, musa):
        assert apply_damage(musa, -1000).readiness == CombatReadiness.INCAPACITATED

    def test_pain_capped(self, musa):
        assert apply_damage(musa, -119).pain == 59.5
        assert apply_damage(apply_damage(musa, -100), 50).pain == 50
        assert apply_damage(apply_damage(musa, -100), -100).pain == 100


class TestClampAndResources:
    """Test clamping and resource deduction."""

    def test_clamp_player(self, musa):
        wild = replace(musa, health=-5, ki=500, consciousness=150, balance=-3)
        clamped = clamp_player(wild)
        assert clamped.health == 0
        assert clamped.ki == musa.max_ki
        assert clamped.consciousness == 100
        assert clamped.balance == 0
        assert clamped.readiness == CombatReadiness.INCAPACITATED

    def test_consume_resources(self, musa):
        spent = consume_resources(musa, 15, 10)
        assert spent.ki == musa.ki - 15
        assert spent.stamina == musa.stamina - 10

    def test_consume_never_negative(self, musa):
        spent = consume_resources(musa, 1000, 1000)
        assert spent.ki == 0
        assert spent.stamina == 0


class TestPredicates:
    """Test can_act, is_defeated and effectiveness rating."""

    def test_fresh_player_can_act(self, musa):
        assert can_act(musa)

    @pytest.mark.parametrize("builder", [
        lambda b: b.stunned(),
        lambda b: b.with_health(0),
        lambda b: b.with_condition(consciousness=10),
        lambda b: b.with_condition(balance=5),
    ])
    def test_cannot_act(self, builder):
        assert not can_act(builder(PlayerBuilder()).build())

    def test_is_defeated(self, musa):
        assert not is_defeated(musa)
        assert is_defeated(replace(musa, health=0))
        assert is_defeated(replace(musa, consciousness=0))

    def test_combat_effectiveness(self, musa):
        assert combat_effectiveness(musa) == 100
        assert combat_effectiveness(replace(musa, health=0, consciousness=0, ki=0, stamina=0, balance=0)) == 0
        assert combat_effectiveness(replace(musa, health=musa.max_health / 2)) < 100


class TestRegeneration:
    """Test resource recovery over time."""

    def test_ten_percent_per_second(self):
        player = PlayerBuilder(stance=TrigramStance.GEON).with_resources(ki=50, stamina=50).build()
        rested = regenerate_resources(player, 1000)
        # Geon ki regen modifier is 1.0
        assert rested.ki == pytest.approx(50 + player.max_ki * 0.1)
        assert rested.stamina == pytest.approx(50 + player.max_stamina * 0.1)

    def test_stance_scales_ki(self):
        player = PlayerBuilder(stance=TrigramStance.GON).with_resources(ki=0).build()
        rested = regenerate_resources(player, 1000)
        assert rested.ki == pytest.approx(player.max_ki * 0.1 * 1.3)

    def test_clamped_to_max(self, musa):
        rested = regenerate_resources(musa, 60000)
        assert rested.ki == musa.max_ki
        assert rested.stamina == musa.max_stamina
        assert_within_bounds(rested)

    def test_effects_tick_and_stun_clears(self, musa):
        stun = materialize(effect("t", EffectType.STUN, EffectIntensity.LOW, 1000), "src", 0)
        stunned = replace(musa, effects=(stun,), is_stunned=True)

        still = regenerate_resources(stunned, 500)
        assert still.is_stunned
        assert still.effects[0].remaining == 500

        recovered = regenerate_resources(still, 500)
        assert recovered.effects == ()
        assert not recovered.is_stunned

    def test_negative_elapsed(self, musa):
        with pytest.raises(ValueError):
            regenerate_resources(musa, -10)


class TestChangeStance:
    """Test stance transitions."""

    def test_same_stance_noop(self, musa):
        result = change_stance(musa, musa.stance, 100)
        assert result.success
        assert result.player is musa
        assert (result.ki_cost, result.stamina_cost) == (0, 0)

    def test_successful_change(self, musa):
        ki_cost, stamina_cost = stance_change_cost(TrigramStance.GEON, TrigramStance.SON)
        result = change_stance(musa, TrigramStance.SON, 2500)
        assert result.success
        assert result.player.stance == TrigramStance.SON
        assert result.player.ki == musa.ki - ki_cost
        assert result.player.stamina == musa.stamina - stamina_cost
        assert result.player.last_stance_change == 2500
        assert "Wind" in result.message.english

    def test_insufficient_resources_reported(self):
        tired = PlayerBuilder().with_resources(ki=1, stamina=1).build()
        result = change_stance(tired, TrigramStance.SON, 0)
        assert not result.success
        assert result.player is tired
        assert result.message.english.startswith("Insufficient")

    def test_stunned_player_rejected(self):
        stunned = PlayerBuilder().stunned().build()
        result = change_stance(stunned, TrigramStance.TAE, 0)
        assert not result.success
        assert result.player is stunned
