"""
Canned product content and design templates, keyed by product type.

Both tables are exact, case-sensitive lookups. The keys currently overlap but
the tables are maintained independently; a miss on either falls back to a
generic entry instead of failing.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class GeneratedContent:
    title: str
    description: str
    content: tuple[str, ...]


@dataclass(frozen=True)
class ProductTemplate:
    type: str
    content_structure: tuple[str, ...]
    design_style: str
    color_palette: tuple[str, ...]
    typography: tuple[str, str]     # (heading, body)
    page_count: int

    def design_dict(self) -> dict[str, Any]:
        heading, body = self.typography
        return {
            "style": self.design_style,
            "colorPalette": list(self.color_palette),
            "typography": {"heading": heading, "body": body},
            "pageCount": self.page_count,
        }


# ── Content ───────────────────────────────────────────────────────────────────

_FALLBACK_BULLETS = ("Premium Content", "Professional Design", "Easy to Use", "High Quality")

CONTENT_BY_TYPE: Mapping[str, GeneratedContent] = MappingProxyType({
    "Budget Planner Journal": GeneratedContent(
        title="Complete Budget Planner & Financial Success Journal",
        description=(
            "Master your finances with this comprehensive budget planner featuring monthly trackers, "
            "expense logs, savings goals, and debt payoff strategies. Perfect for achieving financial freedom."
        ),
        content=(
            "Monthly Budget Overview Pages", "Weekly Expense Tracking Sheets", "Savings Goals Tracker",
            "Debt Payoff Planner", "Bill Payment Checklist", "Financial Goals Worksheets",
            "Income & Expense Summary", "Net Worth Calculator Pages",
        ),
    ),
    "Mindfulness Coloring Book": GeneratedContent(
        title="Mindful Moments: Adult Coloring for Stress Relief",
        description=(
            "Find peace and relaxation with 50 intricate mandala and nature-inspired designs. Each page is "
            "crafted to promote mindfulness and reduce stress through creative expression."
        ),
        content=(
            "50 Unique Mandala Designs", "Nature-Inspired Patterns", "Geometric Zen Illustrations",
            "Floral Meditation Art", "Abstract Mindfulness Scenes", "Single-Sided Pages for Easy Removal",
            "Perforated Edges", "Mindfulness Tips & Techniques",
        ),
    ),
    "Social Media Content Planner": GeneratedContent(
        title="Social Media Content Planner & Strategy Guide",
        description=(
            "Plan, organize, and optimize your social media presence with this comprehensive content planner. "
            "Includes monthly calendars, post templates, analytics trackers, and hashtag research tools."
        ),
        content=(
            "Monthly Content Calendars", "Weekly Planning Spreads", "Post Idea Brainstorming Pages",
            "Hashtag Research Tracker", "Analytics & Metrics Log", "Content Pillars Worksheet",
            "Engagement Tracking Sheets", "Campaign Planning Templates",
        ),
    ),
    "Wedding Planning Checklist": GeneratedContent(
        title="Ultimate Wedding Planning Checklist & Organizer",
        description=(
            "Plan your dream wedding stress-free with this complete organizer featuring timeline checklists, "
            "vendor trackers, budget worksheets, and guest list management tools."
        ),
        content=(
            "12-Month Wedding Timeline", "Vendor Contact Directory", "Budget Planning Worksheets",
            "Guest List & RSVP Tracker", "Seating Chart Templates", "Menu Planning Pages",
            "Photography Shot List", "Day-of Timeline Scheduler",
        ),
    ),
    "Habit Tracker Journal": GeneratedContent(
        title="Daily Habit Tracker & Goal Achievement Journal",
        description=(
            "Build lasting habits and achieve your goals with this beautifully designed tracker. Features daily, "
            "weekly, and monthly habit grids, goal-setting worksheets, and reflection prompts."
        ),
        content=(
            "Monthly Habit Tracking Grids", "Weekly Progress Check-ins", "Goal Setting Worksheets",
            "Daily Routine Planner", "Habit Stacking Templates", "Reflection Journal Prompts",
            "Progress Review Pages", "Motivational Quote Pages",
        ),
    ),
    "Recipe Organization Templates": GeneratedContent(
        title="Complete Recipe Organization System & Meal Planner",
        description=(
            "Organize your favorite recipes and plan meals effortlessly. Includes recipe cards, meal planning "
            "calendars, grocery lists, and cooking notes sections."
        ),
        content=(
            "Recipe Card Templates", "Monthly Meal Planner", "Grocery Shopping Lists",
            "Pantry Inventory Sheets", "Cooking Notes Pages", "Recipe Index & Categories",
            "Nutrition Information Log", "Kitchen Conversion Charts",
        ),
    ),
    "Gratitude Journal Prompts": GeneratedContent(
        title="Daily Gratitude Journal with Prompts & Reflections",
        description=(
            "Cultivate a positive mindset with 365 gratitude prompts and reflection pages. Features daily "
            "gratitude logs, weekly reflections, and mindfulness exercises."
        ),
        content=(
            "365 Daily Gratitude Prompts", "Morning Reflection Pages", "Evening Gratitude Logs",
            "Weekly Review Sections", "Monthly Highlights Tracker", "Positive Affirmations",
            "Mindfulness Exercises", "Gratitude Challenge Pages",
        ),
    ),
    "Kids Activity Puzzle Book": GeneratedContent(
        title="Fun Kids Activity & Puzzle Book: 100+ Brain Games",
        description=(
            "Keep kids entertained and learning with 100+ puzzles including mazes, word searches, sudoku, "
            "coloring pages, and brain teasers. Perfect for ages 6-12."
        ),
        content=(
            "30 Challenging Mazes", "20 Word Search Puzzles", "15 Sudoku for Kids", "20 Coloring Pages",
            "15 Crossword Puzzles", "Connect the Dots Activities", "Spot the Difference Games",
            "Answer Key Section",
        ),
    ),
    "Fitness Workout Log": GeneratedContent(
        title="Complete Fitness Workout Log & Progress Tracker",
        description=(
            "Track your fitness journey with detailed workout logs, exercise planners, progress charts, and "
            "goal-setting worksheets. Perfect for gym and home workouts."
        ),
        content=(
            "Weekly Workout Planners", "Exercise Tracking Sheets", "Progress Measurement Logs",
            "Strength Training Tracker", "Cardio Activity Log", "Personal Records Pages",
            "Goal Setting Worksheets", "Body Measurement Charts",
        ),
    ),
    "Motivational Quote Stickers": GeneratedContent(
        title="Motivational Quote Sticker Pack: 50 Inspirational Designs",
        description=(
            "Brighten your day with 50 beautifully designed motivational quote stickers. Perfect for planners, "
            "laptops, water bottles, and journals. Waterproof and durable."
        ),
        content=(
            "50 Unique Quote Designs", "Waterproof Vinyl Material", "Die-Cut Shapes", "Vibrant Color Schemes",
            "Matte Finish Options", "Various Size Stickers", "Inspirational Themes", "Easy Peel Backing",
        ),
    ),
})


# ── Design templates ──────────────────────────────────────────────────────────

DEFAULT_TEMPLATE = ProductTemplate(
    type="General",
    content_structure=("Cover", "Content Pages"),
    design_style="Modern Clean",
    color_palette=("#3498DB", "#2ECC71", "#ECF0F1", "#95A5A6", "#2C3E50"),
    typography=("Inter", "Inter"),
    page_count=100,
)

TEMPLATES_BY_TYPE: Mapping[str, ProductTemplate] = MappingProxyType({
    "Budget Planner Journal": ProductTemplate(
        "Planner", ("Cover", "Introduction", "Monthly Pages", "Weekly Pages", "Notes"),
        "Minimalist Modern", ("#2C3E50", "#3498DB", "#ECF0F1", "#E74C3C", "#F39C12"),
        ("Montserrat", "Open Sans"), 120,
    ),
    "Mindfulness Coloring Book": ProductTemplate(
        "Coloring Book", ("Cover", "Introduction", "Coloring Pages", "Mindfulness Tips"),
        "Artistic Zen", ("#8E44AD", "#3498DB", "#1ABC9C", "#E67E22", "#E74C3C"),
        ("Playfair Display", "Lato"), 104,
    ),
    "Social Media Content Planner": ProductTemplate(
        "Planner", ("Cover", "Strategy Guide", "Monthly Calendars", "Weekly Plans", "Analytics"),
        "Bold Modern", ("#E91E63", "#9C27B0", "#3F51B5", "#00BCD4", "#FFC107"),
        ("Poppins", "Roboto"), 150,
    ),
    "Wedding Planning Checklist": ProductTemplate(
        "Organizer", ("Cover", "Timeline", "Budget", "Vendor Pages", "Checklists", "Guest Management"),
        "Elegant Romantic", ("#D4AF37", "#FFB6C1", "#FFFFFF", "#F5F5F5", "#8B4513"),
        ("Cormorant Garamond", "Crimson Text"), 180,
    ),
    "Habit Tracker Journal": ProductTemplate(
        "Journal", ("Cover", "Goal Setting", "Monthly Trackers", "Weekly Check-ins", "Reflections"),
        "Clean Minimalist", ("#27AE60", "#2ECC71", "#34495E", "#95A5A6", "#ECF0F1"),
        ("Raleway", "Nunito"), 130,
    ),
    "Recipe Organization Templates": ProductTemplate(
        "Template Set", ("Cover", "Index", "Recipe Cards", "Meal Planners", "Shopping Lists"),
        "Warm Homestyle", ("#E67E22", "#F39C12", "#D35400", "#ECF0F1", "#2C3E50"),
        ("Merriweather", "Source Sans Pro"), 100,
    ),
    "Gratitude Journal Prompts": ProductTemplate(
        "Journal", ("Cover", "Introduction", "Daily Prompts", "Weekly Reflections", "Monthly Reviews"),
        "Serene Natural", ("#1ABC9C", "#16A085", "#F39C12", "#E8F8F5", "#2C3E50"),
        ("Libre Baskerville", "Karla"), 200,
    ),
    "Kids Activity Puzzle Book": ProductTemplate(
        "Activity Book", ("Cover", "Instructions", "Puzzle Pages", "Coloring Pages", "Answer Key"),
        "Playful Colorful", ("#FF6B6B", "#4ECDC4", "#FFE66D", "#95E1D3", "#F38181"),
        ("Fredoka One", "Quicksand"), 110,
    ),
    "Fitness Workout Log": ProductTemplate(
        "Log Book", ("Cover", "Goal Setting", "Weekly Logs", "Progress Charts", "Measurements"),
        "Bold Athletic", ("#E74C3C", "#C0392B", "#34495E", "#ECF0F1", "#F39C12"),
        ("Oswald", "PT Sans"), 140,
    ),
    "Motivational Quote Stickers": ProductTemplate(
        "Sticker Pack", ("Preview Sheet", "Individual Stickers", "Application Guide"),
        "Vibrant Inspirational", ("#FF6B9D", "#C44569", "#FFC048", "#00D2FF", "#926BFF"),
        ("Bebas Neue", "Comfortaa"), 5,
    ),
})


def generate_content(product_type: str) -> GeneratedContent:
    """Return canned content for ``product_type`` or a generic templated entry."""
    found = CONTENT_BY_TYPE.get(product_type)
    if found is not None:
        return found
    return GeneratedContent(
        title=f"Professional {product_type}",
        description=(
            f"High-quality {product_type.lower()} designed for maximum value and user satisfaction."
        ),
        content=_FALLBACK_BULLETS,
    )


def select_design_template(product_type: str) -> ProductTemplate:
    return TEMPLATES_BY_TYPE.get(product_type, DEFAULT_TEMPLATE)
