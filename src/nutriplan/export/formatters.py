"""Output formatters for generated meal plans."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from nutriplan.plans.models import GeneratedMealPlan


class TableFormatter:
    """Format plans as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def format(self, plan: GeneratedMealPlan) -> None:
        """Print formatted tables to console."""
        energy = plan.energy
        macros = plan.macros
        header_lines = [
            f"[bold]DRAFT MEAL PLAN[/bold] - {datetime.now().strftime('%Y-%m-%d %H:%M')}",
        ]
        if plan.profile.name:
            header_lines.append(f"Client: {plan.profile.name}")
        header_lines.extend([
            f"BMR: {energy.basal_expenditure:.0f} kcal | TDEE: {energy.total_expenditure} kcal",
            f"Target: [bold]{plan.target_calories} kcal[/bold] "
            f"(P {macros.protein_g}g / C {macros.carb_g}g / F {macros.fat_g}g)",
        ])
        self.console.print(Panel("\n".join(header_lines), title="Meal Plan"))

        meal_table = Table(title="Meals")
        meal_table.add_column("Meal", style="cyan")
        meal_table.add_column("kcal", justify="right")
        meal_table.add_column("Template")
        meal_table.add_column("Template kcal", justify="right", style="dim")

        for meal in plan.meals:
            if meal.template:
                template_name = meal.template.name
                template_kcal = f"{meal.template.target_kcal:.0f}"
            else:
                template_name = "[yellow]manual composition[/yellow]"
                template_kcal = "-"
            meal_table.add_row(meal.name, str(meal.target_calories), template_name, template_kcal)

        meal_table.add_row(
            "[bold]TOTAL[/bold]",
            f"[bold]{sum(m.target_calories for m in plan.meals)}[/bold]",
            "",
            "",
        )
        self.console.print(meal_table)

        for warning in plan.warnings:
            self.console.print(f"[yellow]Warning: {warning}[/yellow]")


class JSONFormatter:
    """Format plans as JSON for programmatic use."""

    def format(self, plan: GeneratedMealPlan) -> str:
        data = plan.to_dict()
        data["timestamp"] = datetime.now().isoformat()
        return json.dumps(data, indent=2, ensure_ascii=False)


class MarkdownFormatter:
    """Format plans as Markdown for handoff or documentation."""

    def format(self, plan: GeneratedMealPlan) -> str:
        macros = plan.macros
        lines = ["# Draft Meal Plan", ""]
        if plan.profile.name:
            lines.append(f"**Client:** {plan.profile.name}")
        lines.extend([
            f"**Calories:** {plan.target_calories} kcal",
            f"**Macros:** {macros.protein_g}g protein, {macros.carb_g}g carbohydrate, "
            f"{macros.fat_g}g fat",
            "",
            "## Meals",
            "",
            "| Meal | kcal | Template |",
            "|------|------|----------|",
        ])

        for meal in plan.meals:
            template = meal.template.name if meal.template else "_manual composition_"
            lines.append(f"| {meal.name} | {meal.target_calories} | {template} |")

        matched = [m for m in plan.meals if m.template]
        if matched:
            lines.extend(["", "## Template Items"])
            for meal in matched:
                lines.extend(["", f"### {meal.name}: {meal.template.name}", ""])
                for item in meal.template.scaled_items(meal.target_calories):
                    optional = " (optional)" if item.optional else ""
                    lines.append(
                        f"- {item.food_name}: {item.quantity:g} {item.measure_name}{optional}"
                    )

        if plan.warnings:
            lines.extend(["", "## Warnings", ""])
            lines.extend(f"- {w}" for w in plan.warnings)

        lines.extend(["", "## Reasoning", "", plan.reasoning])
        return "\n".join(lines)


def format_plan(
    plan: GeneratedMealPlan,
    output_format: str = "table",
    console: Optional[Console] = None,
) -> Optional[str]:
    """Format a generated plan in the specified format.

    Args:
        plan: Plan to format
        output_format: One of 'table', 'json', 'markdown'
        console: Rich console (for table format)

    Returns:
        Formatted string for json/markdown, None for table (prints directly)
    """
    if output_format == "table":
        TableFormatter(console).format(plan)
        return None
    elif output_format == "json":
        return JSONFormatter().format(plan)
    elif output_format == "markdown":
        return MarkdownFormatter().format(plan)
    else:
        raise ValueError(f"Unknown output format: {output_format}")
