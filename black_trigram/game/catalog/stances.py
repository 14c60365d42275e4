"""
Trigram stance catalog and stance effectiveness matrix.

Each of the eight stances carries its symbol, elemental theme and numeric
modifiers. The effectiveness matrix gives the damage-side advantage of an
attacking stance over a defending one; it is hand-tuned and deliberately not
symmetric.
"""
from dataclasses import dataclass

from ...core.data_structures import KoreanText
from ...core.game_enums import STANCE_ORDER, TrigramStance


@dataclass(frozen=True)
class StanceModifiers:
    """Numeric multipliers a stance applies while held."""
    damage: float = 1.0
    defense: float = 1.0
    speed: float = 1.0
    ki_regen: float = 1.0


@dataclass(frozen=True)
class StanceData:
    """Static description of one trigram stance."""
    stance: TrigramStance
    name: KoreanText
    symbol: str
    element: KoreanText
    philosophy: KoreanText
    combat_role: KoreanText
    signature_technique_id: str
    modifiers: StanceModifiers


STANCE_DATA: dict[TrigramStance, StanceData] = {
    TrigramStance.GEON: StanceData(
        stance=TrigramStance.GEON,
        name=KoreanText("건", "Heaven", "geon"),
        symbol="☰",
        element=KoreanText("천", "Sky"),
        philosophy=KoreanText("창조와 힘의 원리", "Principle of creation and strength"),
        combat_role=KoreanText("직접 공격", "Direct assault"),
        signature_technique_id="geon_heavenly_thunder_strike",
        modifiers=StanceModifiers(damage=1.2, defense=0.9, speed=1.0, ki_regen=1.0),
    ),
    TrigramStance.TAE: StanceData(
        stance=TrigramStance.TAE,
        name=KoreanText("태", "Lake", "tae"),
        symbol="☱",
        element=KoreanText("택", "Marsh"),
        philosophy=KoreanText("기쁨과 유연함", "Joy and flexibility"),
        combat_role=KoreanText("유동적 공격", "Fluid attacks"),
        signature_technique_id="tae_flowing_strikes",
        modifiers=StanceModifiers(damage=1.0, defense=1.0, speed=1.1, ki_regen=1.1),
    ),
    TrigramStance.LI: StanceData(
        stance=TrigramStance.LI,
        name=KoreanText("리", "Fire", "li"),
        symbol="☲",
        element=KoreanText("화", "Flame"),
        philosophy=KoreanText("밝음과 지혜", "Brightness and wisdom"),
        combat_role=KoreanText("정밀 공격", "Precision strikes"),
        signature_technique_id="li_flame_spear",
        modifiers=StanceModifiers(damage=1.1, defense=0.9, speed=1.1, ki_regen=0.9),
    ),
    TrigramStance.JIN: StanceData(
        stance=TrigramStance.JIN,
        name=KoreanText("진", "Thunder", "jin"),
        symbol="☳",
        element=KoreanText("뇌", "Lightning"),
        philosophy=KoreanText("움직임과 각성", "Movement and awakening"),
        combat_role=KoreanText("돌격 공격", "Charging attacks"),
        signature_technique_id="jin_lightning_flash",
        modifiers=StanceModifiers(damage=1.15, defense=0.85, speed=1.2, ki_regen=0.9),
    ),
    TrigramStance.SON: StanceData(
        stance=TrigramStance.SON,
        name=KoreanText("손", "Wind", "son"),
        symbol="☴",
        element=KoreanText("풍", "Breeze"),
        philosophy=KoreanText("침투와 순응", "Penetration and adaptation"),
        combat_role=KoreanText("연속 공격", "Continuous attacks"),
        signature_technique_id="son_whirlwind_barrage",
        modifiers=StanceModifiers(damage=0.9, defense=0.95, speed=1.3, ki_regen=1.0),
    ),
    TrigramStance.GAM: StanceData(
        stance=TrigramStance.GAM,
        name=KoreanText("감", "Water", "gam"),
        symbol="☵",
        element=KoreanText("수", "Stream"),
        philosophy=KoreanText("위험과 깊이", "Danger and depth"),
        combat_role=KoreanText("반격", "Counter-attacks"),
        signature_technique_id="gam_water_counter",
        modifiers=StanceModifiers(damage=1.0, defense=1.1, speed=1.0, ki_regen=1.2),
    ),
    TrigramStance.GAN: StanceData(
        stance=TrigramStance.GAN,
        name=KoreanText("간", "Mountain", "gan"),
        symbol="☶",
        element=KoreanText("산", "Peak"),
        philosophy=KoreanText("정지와 안정", "Stillness and stability"),
        combat_role=KoreanText("방어", "Defense"),
        signature_technique_id="gan_rock_defense",
        modifiers=StanceModifiers(damage=0.8, defense=1.4, speed=0.8, ki_regen=1.1),
    ),
    TrigramStance.GON: StanceData(
        stance=TrigramStance.GON,
        name=KoreanText("곤", "Earth", "gon"),
        symbol="☷",
        element=KoreanText("지", "Ground"),
        philosophy=KoreanText("수용과 양육", "Receptivity and nurturing"),
        combat_role=KoreanText("제압 기술", "Grappling techniques"),
        signature_technique_id="gon_earth_embrace",
        modifiers=StanceModifiers(damage=1.05, defense=1.2, speed=0.9, ki_regen=1.3),
    ),
}


# Rows are attacker stances, columns defender stances
_S = TrigramStance
EFFECTIVENESS_MATRIX: dict[TrigramStance, dict[TrigramStance, float]] = {
    _S.GEON: {_S.GEON: 1.0, _S.TAE: 1.1, _S.LI: 0.9, _S.JIN: 1.0, _S.SON: 1.2, _S.GAM: 0.8, _S.GAN: 1.1, _S.GON: 0.9},
    _S.TAE:  {_S.GEON: 0.9, _S.TAE: 1.0, _S.LI: 1.1, _S.JIN: 0.8, _S.SON: 1.0, _S.GAM: 1.2, _S.GAN: 0.9, _S.GON: 1.1},
    _S.LI:   {_S.GEON: 1.1, _S.TAE: 0.9, _S.LI: 1.0, _S.JIN: 1.2, _S.SON: 0.8, _S.GAM: 1.0, _S.GAN: 1.1, _S.GON: 0.9},
    _S.JIN:  {_S.GEON: 1.0, _S.TAE: 1.2, _S.LI: 0.8, _S.JIN: 1.0, _S.SON: 1.1, _S.GAM: 0.9, _S.GAN: 1.0, _S.GON: 1.1},
    _S.SON:  {_S.GEON: 0.8, _S.TAE: 1.0, _S.LI: 1.2, _S.JIN: 0.9, _S.SON: 1.0, _S.GAM: 1.1, _S.GAN: 0.8, _S.GON: 1.0},
    _S.GAM:  {_S.GEON: 1.2, _S.TAE: 0.8, _S.LI: 1.0, _S.JIN: 1.1, _S.SON: 0.9, _S.GAM: 1.0, _S.GAN: 1.2, _S.GON: 0.8},
    _S.GAN:  {_S.GEON: 0.9, _S.TAE: 1.1, _S.LI: 0.9, _S.JIN: 1.0, _S.SON: 1.2, _S.GAM: 0.8, _S.GAN: 1.0, _S.GON: 1.1},
    _S.GON:  {_S.GEON: 1.1, _S.TAE: 0.9, _S.LI: 1.1, _S.JIN: 0.9, _S.SON: 1.0, _S.GAM: 1.2, _S.GAN: 0.9, _S.GON: 1.0},
}
del _S


def get_stance_data(stance: TrigramStance) -> StanceData:
    """Get the static data for a stance.

    Raises:
        KeyError: If stance is not one of the eight trigrams
    """
    if stance not in STANCE_DATA:
        raise KeyError(f"Unknown stance: {stance}")
    return STANCE_DATA[stance]


def effectiveness_of(attacker_stance: TrigramStance, defender_stance: TrigramStance) -> float:
    """Damage multiplier of attacker_stance against defender_stance."""
    return EFFECTIVENESS_MATRIX[attacker_stance][defender_stance]


def stance_distance(from_stance: TrigramStance, to_stance: TrigramStance) -> int:
    """Circular distance between two stances in traditional order (0-4)."""
    diff = abs(STANCE_ORDER.index(to_stance) - STANCE_ORDER.index(from_stance))
    return min(diff, len(STANCE_ORDER) - diff)


def stance_change_cost(from_stance: TrigramStance, to_stance: TrigramStance) -> tuple[int, int]:
    """Ki and stamina cost of moving between two stances.

    Adjacent trigrams are cheap, opposite trigrams expensive. A fast target
    stance shaves the cost down. Holding the current stance is free.

    Returns:
        (ki_cost, stamina_cost)
    """
    if from_stance == to_stance:
        return 0, 0

    distance = stance_distance(from_stance, to_stance)
    speed = STANCE_DATA[to_stance].modifiers.speed
    ki_cost = (5 + distance * 2) / speed
    stamina_cost = (3 + distance * 1.5) / speed
    return round(ki_cost), round(stamina_cost)


def validate_stance_catalog() -> None:
    """Check the stance catalog and matrix are complete and well-formed.

    Raises:
        ValueError: If any stance is missing or an entry is out of range
    """
    missing = [s for s in TrigramStance if s not in STANCE_DATA]
    if missing:
        raise ValueError(f"Stance catalog missing entries: {[s.value for s in missing]}")

    for attacker in TrigramStance:
        row = EFFECTIVENESS_MATRIX.get(attacker)
        if row is None or len(row) != len(TrigramStance):
            raise ValueError(f"Effectiveness matrix row for {attacker.value} is incomplete")
        for defender, value in row.items():
            if attacker == defender and value != 1.0:
                raise ValueError(f"Effectiveness of {attacker.value} against itself must be 1.0")
            if not 0.7 <= value <= 1.3:
                raise ValueError(
                    f"Effectiveness {attacker.value}->{defender.value} out of range: {value}"
                )


validate_stance_catalog()
