"""
Typed shapes of the PokeAPI documents returned by the client.
Structural only: payloads are returned as parsed JSON and never validated.
"""

from typing import Any, Dict, List, Optional, TypedDict


class NamedResource(TypedDict):
    name: str
    url: str


class PaginatedResponse(TypedDict):
    count: int
    next: Optional[str]
    previous: Optional[str]
    results: List[NamedResource]


class Name(TypedDict):
    name: str
    language: NamedResource


class FlavorText(TypedDict):
    flavor_text: str
    language: NamedResource
    version: NamedResource


class AbilitySlot(TypedDict):
    ability: NamedResource
    is_hidden: bool
    slot: int


class Stat(TypedDict):
    base_stat: int
    effort: int
    stat: NamedResource


class PokemonTypeSlot(TypedDict):
    slot: int
    type: NamedResource


class GameIndex(TypedDict):
    game_index: int
    version: NamedResource


class VersionGroupDetail(TypedDict):
    level_learned_at: int
    move_learn_method: NamedResource
    order: Optional[int]
    version_group: NamedResource


class PokemonMove(TypedDict):
    move: NamedResource
    version_group_details: List[VersionGroupDetail]


class Cries(TypedDict):
    latest: str
    legacy: str


class Pokemon(TypedDict):
    id: int
    name: str
    order: int
    height: int
    weight: int
    base_experience: int
    is_default: bool
    location_area_encounters: str
    abilities: List[AbilitySlot]
    cries: Cries
    forms: List[NamedResource]
    game_indices: List[GameIndex]
    held_items: List[Dict[str, Any]]
    moves: List[PokemonMove]
    past_abilities: List[Dict[str, Any]]
    past_types: List[Dict[str, Any]]
    species: NamedResource
    sprites: Dict[str, Any]
    stats: List[Stat]
    types: List[PokemonTypeSlot]


class DamageRelations(TypedDict):
    no_damage_to: List[NamedResource]
    half_damage_to: List[NamedResource]
    double_damage_to: List[NamedResource]
    no_damage_from: List[NamedResource]
    half_damage_from: List[NamedResource]
    double_damage_from: List[NamedResource]


class PokemonSlot(TypedDict, total=False):
    is_hidden: bool
    slot: int
    pokemon: NamedResource


class PokemonType(TypedDict):
    id: int
    name: str
    damage_relations: DamageRelations
    past_damage_relations: List[Dict[str, Any]]
    game_indices: List[GameIndex]
    generation: NamedResource
    move_damage_class: Optional[NamedResource]
    names: List[Name]
    pokemon: List[PokemonSlot]
    moves: List[NamedResource]


class Genus(TypedDict):
    genus: str
    language: NamedResource


class PokedexNumber(TypedDict):
    entry_number: int
    pokedex: NamedResource


class Variety(TypedDict):
    is_default: bool
    pokemon: NamedResource


class Species(TypedDict):
    id: int
    name: str
    order: int
    gender_rate: int
    capture_rate: int
    base_happiness: Optional[int]
    is_baby: bool
    is_legendary: bool
    is_mythical: bool
    hatch_counter: Optional[int]
    has_gender_differences: bool
    forms_switchable: bool
    growth_rate: NamedResource
    pokedex_numbers: List[PokedexNumber]
    egg_groups: List[NamedResource]
    color: NamedResource
    shape: Optional[NamedResource]
    evolves_from_species: Optional[NamedResource]
    evolution_chain: Dict[str, str]
    habitat: Optional[NamedResource]
    generation: NamedResource
    names: List[Name]
    pal_park_encounters: List[Dict[str, Any]]
    flavor_text_entries: List[FlavorText]
    form_descriptions: List[Dict[str, Any]]
    genera: List[Genus]
    varieties: List[Variety]


class EffectEntry(TypedDict):
    effect: str
    short_effect: str
    language: NamedResource


class Ability(TypedDict):
    id: int
    name: str
    is_main_series: bool
    generation: NamedResource
    names: List[Name]
    effect_entries: List[EffectEntry]
    effect_changes: List[Dict[str, Any]]
    flavor_text_entries: List[FlavorText]
    pokemon: List[PokemonSlot]


class Generation(TypedDict):
    id: int
    name: str
    abilities: List[NamedResource]
    main_region: NamedResource
    moves: List[NamedResource]
    names: List[Name]
    pokemon_species: List[NamedResource]
    types: List[NamedResource]
    version_groups: List[NamedResource]
