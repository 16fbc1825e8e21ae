from __future__ import annotations

import html
from typing import List, Sequence

from pokegrid import config
from pokegrid.models import Ability, Record, Stat

MAX_STAT_VALUE = 255

CATALOG_CSS = """
<style>
  .poke-grid-card {
    display: block;
    padding: 14px 12px 12px 12px;
    margin-bottom: 16px;
    border-radius: 12px;
    background: #ffffff;
    text-decoration: none !important;
    color: #000000 !important;
    transition: transform 0.15s ease-in-out;
  }
  .poke-grid-card:hover { transform: scale(1.04); }
  .poke-grid-card .card-name { font-size: 1.1rem; font-weight: 800; margin-bottom: 6px; }
  .poke-grid-card img { display: block; margin: 0 auto; height: 120px; width: auto; object-fit: contain; }
  .poke-grid-card .card-dex { text-align: center; color: #555555; font-size: 0.85rem; margin: 6px 0; }
  .pod-chips { display: flex; flex-wrap: wrap; gap: 6px; justify-content: center; }
  .pod-chip {
    padding: 3px 10px;
    border-radius: 999px;
    font-size: 0.78rem;
    font-weight: 700;
    color: #FFFFFF;
    text-shadow: 0 1px 2px rgba(0,0,0,0.35);
    white-space: nowrap;
  }
  .detail-card { background: #ffffff; border-radius: 16px; padding: 24px; }
  .detail-header { text-align: center; margin-bottom: 12px; }
  .detail-header .name { font-size: 2.2rem; font-weight: 800; color: #0057D9; }
  .detail-header .dex { font-size: 1.1rem; color: #666666; }
  .detail-art { display: block; margin: 0 auto 16px auto; max-width: 256px; width: 100%; }
  .detail-section-title { font-weight: 700; margin: 14px 0 6px 0; }
  .meta-pill-grid { display: flex; flex-wrap: wrap; gap: 10px; }
  .meta-pill { background: #f3f4f6; border-radius: 10px; padding: 8px 12px; }
  .meta-pill span { display: block; font-size: 0.75rem; color: #666666; }
  .ability-pill { display: inline-block; margin: 0 6px 6px 0; padding: 4px 12px; border-radius: 999px; background: #dbeafe; }
  .ability-pill.hidden { background: #ede9fe; }
  .stat-row { display: flex; align-items: center; gap: 8px; margin-bottom: 4px; }
  .stat-row .stat-name { width: 80px; font-size: 0.85rem; }
  .stat-row .stat-value { width: 36px; text-align: right; font-weight: 700; }
  .stat-row .stat-bar { flex: 1; height: 8px; border-radius: 4px; background: #e5e7eb; overflow: hidden; }
  .stat-row .stat-fill { height: 100%; border-radius: 4px; }
</style>
"""


def type_color(type_name: str) -> str:
    return config.TYPE_COLORS.get((type_name or "").lower(), config.FALLBACK_TYPE_COLOR)


def build_type_chips_html(types: Sequence[str] | None) -> str:
    spans: List[str] = []
    for t in types or []:
        label = str(t)
        spans.append(
            f'<span class="pod-chip" style="background-color:{type_color(label)};">{html.escape(label.title())}</span>'
        )
    return "".join(spans)


def render_card_html(record: Record) -> str:
    name = html.escape(record.display_name)
    image = html.escape(record.image_url, quote=True)
    shadow = type_color(record.primary_type)
    return (
        f'<div class="poke-grid-card" style="box-shadow: 0 4px 0 {shadow}90;">'
        f'<div class="card-name">{name}</div>'
        f'<img src="{image}" alt="{name}" loading="lazy" />'
        f'<div class="card-dex">{record.dex_number}</div>'
        f'<div class="pod-chips">{build_type_chips_html(record.types)}</div>'
        "</div>"
    )


def _render_abilities(abilities: Sequence[Ability]) -> str:
    pills = []
    for ability in abilities:
        label = html.escape(ability.display_name)
        if ability.is_hidden:
            pills.append(f'<span class="ability-pill hidden">{label} (Hidden Ability)</span>')
        else:
            pills.append(f'<span class="ability-pill">{label}</span>')
    return "".join(pills)


def _render_stats(stats: Sequence[Stat], color: str) -> str:
    rows = []
    for stat in stats:
        width = max(0, min(100, round(stat.base_value * 100 / MAX_STAT_VALUE)))
        rows.append(
            '<div class="stat-row">'
            f'<div class="stat-name">{html.escape(stat.display_name)}</div>'
            f'<div class="stat-value">{stat.base_value}</div>'
            f'<div class="stat-bar"><div class="stat-fill" style="width:{width}%;background:{color};"></div></div>'
            "</div>"
        )
    return "".join(rows)


def format_base_experience(record: Record) -> str:
    return "N/A" if record.base_experience is None else str(record.base_experience)


def render_detail_html(record: Record) -> str:
    name = html.escape(record.display_name)
    image = html.escape(record.image_url, quote=True)
    color = type_color(record.primary_type)
    # Height is reported in decimetres and weight in hectograms.
    pills = [
        ("Base Experience", format_base_experience(record)),
        ("Height", f"{record.height / 10:.1f} m"),
        ("Weight", f"{record.weight / 10:.1f} kg"),
        ("Base Stat Total", str(record.total_stats)),
    ]
    pills_html = "".join(
        f'<div class="meta-pill"><span>{html.escape(label)}</span><strong>{html.escape(value)}</strong></div>'
        for label, value in pills
    )
    parts = [
        '<div class="detail-card">',
        '  <div class="detail-header">',
        f'    <div class="name">{name}</div>',
        f'    <div class="dex">{record.dex_number}</div>',
        "  </div>",
        f'  <img class="detail-art" src="{image}" alt="{name}" />' if image else "",
        '  <div class="detail-section-title">Types</div>',
        f'  <div class="pod-chips" style="justify-content:flex-start;">{build_type_chips_html(record.types)}</div>',
        f'  <div class="detail-section-title">Details</div><div class="meta-pill-grid">{pills_html}</div>',
    ]
    if record.abilities:
        parts.append(f'  <div class="detail-section-title">Abilities</div><div>{_render_abilities(record.abilities)}</div>')
    if record.stats:
        parts.append(f'  <div class="detail-section-title">Base Stats</div>{_render_stats(record.stats, color)}')
    parts.append("</div>")
    return "\n".join(part for part in parts if part)
