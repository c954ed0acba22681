# guides.py
from __future__ import annotations

from typing import List, Dict

# Short blurbs for the results page

def improvement_ideas() -> List[Dict[str, str]]:
    return [
        {"title": "Walk, cycle or share", "summary": "Prefer walking, cycling or shared transport to get around."},
        {"title": "Cleaner energy at home", "summary": "Use less energy and, where possible, choose renewable sources."},
        {"title": "Less meat", "summary": "Try a few meals with less meat over the week."},
        {"title": "Buy local, buy less", "summary": "Favour local and durable products; skip purchases you do not need."},
    ]


def warming_context() -> List[Dict[str, str]]:
    return [
        {"name": "Cumulative emissions to 2100", "why": "The total greenhouse gases released if you kept these habits for the rest of the century."},
        {"name": "Projected warming", "why": "What the world could look like if many people made choices similar to yours."},
        {"name": "Paris Agreement", "why": "Aims to limit warming to 1.5–2.0 °C; current trajectories point to 2.5–3.0 °C by 2100."},
    ]


def disclaimer() -> str:
    return "Educational, simplified visual. A rigorous scientific model may produce different values."
