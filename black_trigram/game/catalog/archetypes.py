"""Player archetype definitions and base stats.

Archetype modifiers are authored game-balance data, not derived values.
"""

from dataclasses import dataclass

from ...core.data_structures import KoreanText
from ...core.game_enums import PlayerArchetype, TrigramStance


@dataclass(frozen=True)
class ArchetypeData:
    """Static data for one character archetype."""
    archetype: PlayerArchetype
    name: KoreanText
    philosophy: KoreanText
    base_health: int
    base_ki: int
    base_stamina: int
    damage_modifier: float
    defense: int        # 0-100, feeds damage reduction
    technique_skill: int  # 0-100, feeds training accuracy score
    core_stance: TrigramStance
    favored_stances: tuple[TrigramStance, ...]
    player_names: tuple[KoreanText, ...]


ARCHETYPE_DATA: dict[PlayerArchetype, ArchetypeData] = {
    PlayerArchetype.MUSA: ArchetypeData(
        archetype=PlayerArchetype.MUSA,
        name=KoreanText("무사", "Warrior", "musa"),
        philosophy=KoreanText("명예와 정의의 길", "The way of honor and justice"),
        base_health=120,
        base_ki=100,
        base_stamina=110,
        damage_modifier=1.2,
        defense=90,
        technique_skill=80,
        core_stance=TrigramStance.GEON,
        favored_stances=(TrigramStance.GEON, TrigramStance.GAN),
        player_names=(KoreanText("강철무사", "Iron Warrior"), KoreanText("용맹무사", "Brave Warrior")),
    ),
    PlayerArchetype.AMSALJA: ArchetypeData(
        archetype=PlayerArchetype.AMSALJA,
        name=KoreanText("암살자", "Assassin", "amsalja"),
        philosophy=KoreanText("침묵과 정확성의 도", "The way of silence and precision"),
        base_health=80,
        base_ki=120,
        base_stamina=100,
        damage_modifier=1.5,
        defense=60,
        technique_skill=90,
        core_stance=TrigramStance.SON,
        favored_stances=(TrigramStance.SON, TrigramStance.GAM),
        player_names=(KoreanText("그림자", "Shadow"), KoreanText("은밀자", "Stealth")),
    ),
    PlayerArchetype.HACKER: ArchetypeData(
        archetype=PlayerArchetype.HACKER,
        name=KoreanText("해커", "Hacker", "hacker"),
        philosophy=KoreanText("지식과 기술의 융합", "The fusion of knowledge and technology"),
        base_health=90,
        base_ki=130,
        base_stamina=80,
        damage_modifier=1.1,
        defense=70,
        technique_skill=95,
        core_stance=TrigramStance.LI,
        favored_stances=(TrigramStance.LI, TrigramStance.JIN),
        player_names=(KoreanText("사이버전사", "Cyber Warrior"), KoreanText("데이터침입자", "Data Infiltrator")),
    ),
    PlayerArchetype.JEONGBO_YOWON: ArchetypeData(
        archetype=PlayerArchetype.JEONGBO_YOWON,
        name=KoreanText("정보요원", "Agent", "jeongbo_yowon"),
        philosophy=KoreanText("적응과 전략의 예술", "The art of adaptation and strategy"),
        base_health=100,
        base_ki=110,
        base_stamina=100,
        damage_modifier=1.0,
        defense=85,
        technique_skill=85,
        core_stance=TrigramStance.TAE,
        favored_stances=(TrigramStance.TAE, TrigramStance.GAN),
        player_names=(KoreanText("정보수집가", "Intelligence Gatherer"), KoreanText("관찰자", "Observer")),
    ),
    PlayerArchetype.JOJIK_POKRYEOKBAE: ArchetypeData(
        archetype=PlayerArchetype.JOJIK_POKRYEOKBAE,
        name=KoreanText("조직폭력배", "Gangster", "jojik_pokryeokbae"),
        philosophy=KoreanText("강함과 의지의 길", "The way of strength and will"),
        base_health=110,
        base_ki=90,
        base_stamina=120,
        damage_modifier=1.3,
        defense=75,
        technique_skill=70,
        core_stance=TrigramStance.JIN,
        favored_stances=(TrigramStance.JIN, TrigramStance.GON),
        player_names=(KoreanText("폭력배", "Gangster"), KoreanText("거친자", "Rough One")),
    ),
}


def get_archetype_data(archetype: PlayerArchetype) -> ArchetypeData:
    """Get the static data for an archetype.

    Raises:
        KeyError: If archetype is not recognized
    """
    if archetype not in ARCHETYPE_DATA:
        raise KeyError(f"Unknown archetype: {archetype}")
    return ARCHETYPE_DATA[archetype]


def archetype_modifier(archetype: PlayerArchetype) -> float:
    """Fixed damage multiplier for an archetype."""
    return get_archetype_data(archetype).damage_modifier


def favored_stances(archetype: PlayerArchetype) -> tuple[TrigramStance, ...]:
    """Stances an archetype prefers, core stance first."""
    return get_archetype_data(archetype).favored_stances
