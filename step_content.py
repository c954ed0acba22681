# step_content.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from models import Step

# Copy shown on each quiz step. Numbers live in emission_catalog.py; this file
# only holds words and icon paths, keyed by step and option id.
# Icon artwork is not shipped: each kiosk drops its own PNGs under the
# QUIZ_ICON_DIR folder (default "icons/") using the relative paths below.
# Options whose file is missing render as text-only cards.


@dataclass(frozen=True)
class OptionContent:
    label: str
    icon: Optional[str] = None


@dataclass(frozen=True)
class StepContent:
    chip_label: str
    title: str
    explainer: str = ""
    # question key -> prompt; only used by catalogs with several questions per step
    question_prompts: Dict[str, str] = field(default_factory=dict)


STEP_CONTENT: Dict[Step, StepContent] = {
    Step.COMMUTE: StepContent(
        chip_label="School",
        title="How do you usually get to school?",
        explainer=(
            "The way you travel to school affects energy use and greenhouse gas emissions. "
            "Walking is the most sustainable option; motorised transport, especially "
            "travelling alone by car, uses more resources and pollutes more."
        ),
        question_prompts={
            "mode": "How do you get to school on most days?",
            "car": "If you go by car: what kind of car is it?",
        },
    ),
    Step.HOME_ENERGY: StepContent(
        chip_label="Energy",
        title="Which kind of energy do you use most at home?",
        explainer=(
            "How we produce and use energy at home directly shapes consumption and emissions. "
            "Renewables such as solar reduce the impact, while fossil sources such as coal "
            "and diesel have a much larger carbon footprint."
        ),
        question_prompts={
            "dwelling": "How big is your home?",
            "grid": "What is your electricity grid mostly made of?",
            "efficiency": "Has your home had efficiency upgrades?",
        },
    ),
    Step.FOOD: StepContent(
        chip_label="Food",
        title="What kind of diet do you usually have?",
        explainer=(
            "Producing meat and other animal products releases methane and carbon dioxide. "
            "Diets with less meat and more plant-based food produce fewer emissions."
        ),
        question_prompts={
            "diet": "Which diet is closest to yours?",
            "waste": "How much food ends up in the bin?",
            "local": "Do you eat local, seasonal food?",
        },
    ),
    Step.SHOPPING: StepContent(
        chip_label="Shopping",
        title="Where do you do your everyday shopping?",
        explainer=(
            "What we buy affects the environment and the local economy. Buying local products "
            "cuts transport emissions; imported goods tend to have a bigger footprint."
        ),
        question_prompts={
            "goods": "How much do you buy in a typical year?",
            "electronics": "New electronics this year?",
        },
    ),
    Step.TRAVEL: StepContent(
        chip_label="Holidays",
        title="How will you travel on your next holidays?",
        explainer=(
            "Planes are less efficient than cars, and the more and longer the flights, "
            "the more energy they need."
        ),
        question_prompts={
            "domestic": "Domestic flights per year",
            "international": "International flights per year",
        },
    ),
    Step.RESULTS: StepContent(
        chip_label="Results",
        title="Results and final reflection",
    ),
}

OPTION_CONTENT: Dict[str, OptionContent] = {
    # standard catalog
    "walk": OptionContent("On foot", "school/walk.png"),
    "minibus-taxi": OptionContent("Minibus taxi", "school/minibus.png"),
    "bus": OptionContent("Bus", "school/bus.png"),
    "private-car": OptionContent("Family car", "school/car.png"),
    "grid-electricity": OptionContent("Grid electricity", "energy/grid.png"),
    "solar-panels": OptionContent("Solar panels", "energy/solar.png"),
    "diesel-generator": OptionContent("Diesel / petrol generator", "energy/generator.png"),
    "firewood-charcoal": OptionContent("Firewood or charcoal", "energy/firewood.png"),
    "heavy-meat-diet": OptionContent("Lots of meat", "food/heavy-meat.png"),
    "some-meat-diet": OptionContent("Some meat", "food/some-meat.png"),
    "vegetarian-diet": OptionContent("Vegetarian", "food/vegetarian.png"),
    "vegan-diet": OptionContent("Vegan", "food/vegan.png"),
    "local-market": OptionContent("Local market", "shopping/local-market.png"),
    "supermarket": OptionContent("Supermarket", "shopping/supermarket.png"),
    "online-shopping": OptionContent("Online shopping", "shopping/online.png"),
    "frequent-imports": OptionContent("Imported products, often", "shopping/imported.png"),
    "stay-home": OptionContent("At home", "holidays/home.png"),
    "near-home": OptionContent("Close to home", "holidays/near.png"),
    "far-from-home": OptionContent("Far from home", "holidays/far.png"),
    "very-far-from-home": OptionContent("Very far from home", "holidays/very-far.png"),
    # advanced catalog
    "mode-car-solo": OptionContent("Driving alone"),
    "mode-carpool": OptionContent("Car share"),
    "mode-bus": OptionContent("Bus"),
    "mode-train": OptionContent("Train / metro"),
    "mode-bike-walk": OptionContent("Bike / walking"),
    "car-petrol": OptionContent("Petrol car"),
    "car-hybrid": OptionContent("Hybrid"),
    "car-electric": OptionContent("Electric"),
    "home-small": OptionContent("Small house / flat"),
    "home-medium": OptionContent("Medium house"),
    "home-large": OptionContent("Large house"),
    "grid-fossil": OptionContent("Fossil-heavy grid"),
    "grid-mixed": OptionContent("Mixed grid"),
    "grid-renewable": OptionContent("Mostly renewable grid"),
    "eff-none": OptionContent("Few efficiency upgrades"),
    "eff-some": OptionContent("Some upgrades (LED, insulation)"),
    "eff-deep": OptionContent("Deep retrofit (heat pump)"),
    "diet-heavy-meat": OptionContent("Meat-rich diet"),
    "diet-mixed": OptionContent("Mixed diet"),
    "diet-vegetarian": OptionContent("Vegetarian"),
    "diet-vegan": OptionContent("Vegan"),
    "waste-high": OptionContent("Lots of food waste"),
    "waste-medium": OptionContent("Some food waste"),
    "waste-low": OptionContent("Minimal food waste"),
    "local-often": OptionContent("Often local / seasonal"),
    "local-rarely": OptionContent("Rarely local / seasonal"),
    "goods-low": OptionContent("Low consumption"),
    "goods-average": OptionContent("Average consumption"),
    "goods-high": OptionContent("High consumption"),
    "electronics-none": OptionContent("None"),
    "electronics-some": OptionContent("A new phone or laptop"),
    "electronics-many": OptionContent("Several devices"),
    "domestic-0": OptionContent("0"),
    "domestic-1": OptionContent("1"),
    "domestic-2": OptionContent("2"),
    "domestic-4": OptionContent("4"),
    "international-0": OptionContent("0"),
    "international-1": OptionContent("1"),
    "international-2": OptionContent("2"),
}


def option_label(option_id: str) -> str:
    content = OPTION_CONTENT.get(option_id)
    return content.label if content else option_id
