"""Loot tables — named pools of weighted entries for the selector."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from sweetdraw.selector import Selector

try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib  # type: ignore[no-redef]


class TableEntry(BaseModel):
    """A named entry with a selection weight."""

    name: str
    weight: float = 1.0


class LootTable(BaseModel):
    """A named collection of weighted entries."""

    name: str
    entries: list[TableEntry]

    @property
    def total_weight(self) -> float:
        return sum(max(0.0, e.weight) for e in self.entries)


# ── Built-in presets ─────────────────────────────────────

BUILTIN_TABLES: dict[str, LootTable] = {
    "rarity": LootTable(
        name="rarity",
        entries=[
            TableEntry(name="Common", weight=70.0),
            TableEntry(name="Rare", weight=25.0),
            TableEntry(name="Legendary", weight=5.0),
        ],
    ),
    "chest": LootTable(
        name="chest",
        entries=[
            TableEntry(name="Gold", weight=50.0),
            TableEntry(name="Potion", weight=25.0),
            TableEntry(name="Scroll", weight=15.0),
            TableEntry(name="Gem", weight=8.0),
            TableEntry(name="Relic", weight=2.0),
        ],
    ),
    "projectile": LootTable(
        name="projectile",
        entries=[
            TableEntry(name="Arrow", weight=10.0),
            TableEntry(name="Fire Bolt", weight=20.0),
            TableEntry(name="Ice Shard", weight=70.0),
        ],
    ),
    "uniform-d6": LootTable(
        name="uniform-d6",
        entries=[TableEntry(name=str(face)) for face in range(1, 7)],
    ),
}


# ── Loading & lookup ─────────────────────────────────────

def load_tables(config_dir: Path | None = None) -> dict[str, LootTable]:
    """Merge built-in presets with user-defined tables from .sweetdraw/tables.toml."""
    tables = dict(BUILTIN_TABLES)

    toml_path = (config_dir or Path.cwd()) / ".sweetdraw" / "tables.toml"
    if toml_path.is_file():
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
        for name, cfg in data.get("tables", {}).items():
            entries = [TableEntry(**e) for e in cfg.get("entries", [])]
            if entries:
                tables[name] = LootTable(name=name, entries=entries)

    return tables


def get_table(name: str, config_dir: Path | None = None) -> LootTable:
    """Look up a table by name (builtins + user config)."""
    tables = load_tables(config_dir)
    if name not in tables:
        available = ", ".join(sorted(tables))
        raise KeyError(f"Unknown table {name!r}. Available: {available}")
    return tables[name]


def pick_entry(table: LootTable, selector: Selector | None = None, bonus: float = 0.0) -> TableEntry:
    """Weighted random choice of one entry from the table."""
    selector = selector or Selector()
    return selector.select_single(table.entries, bonus)


def pick_entries(
    table: LootTable,
    n: int,
    selector: Selector | None = None,
    bonus: float = 0.0,
    distinct: bool = False,
) -> list[TableEntry]:
    """Draw N entries, with replacement unless *distinct*."""
    selector = selector or Selector()
    if distinct:
        return selector.select_distinct(table.entries, n, bonus)
    return selector.select_multiple(table.entries, n, bonus)
