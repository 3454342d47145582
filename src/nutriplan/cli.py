"""CLI interface using Typer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from nutriplan.agent.response import (
    energy_warnings,
    error_envelope,
    plan_envelope,
    targets_envelope,
    template_envelope,
    templates_envelope,
    validation_envelope,
)
from nutriplan.app_logging import configure_logging
from nutriplan.config import get_settings
from nutriplan.plans.external import (
    CalculatedData,
    PlanFormatError,
    extract_json_object,
    parse_external_plan,
)
from nutriplan.plans.generator import generate_meal_plan
from nutriplan.plans.validator import validate_plan
from nutriplan.profiles.energy import calculate_energy_targets
from nutriplan.profiles.models import ClientProfile, InvalidProfile
from nutriplan.templates.catalog import TemplateCatalog, default_catalog, load_catalog
from nutriplan.templates.matcher import TemplateMatcher
from nutriplan.templates.models import MealType

app = typer.Typer(
    help="Nutrition targets and draft meal plans for nutrition professionals",
    no_args_is_help=True,
)
console = Console()

# Subcommand groups
templates_app = typer.Typer(help="Browse meal templates")
schema_app = typer.Typer(help="Export schemas for LLM agents")
config_app = typer.Typer(help="Inspect configuration")

app.add_typer(templates_app, name="templates")
app.add_typer(schema_app, name="schema")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    configure_logging(verbose)


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict) -> None:
    """Print a JSON document to stdout."""
    print(json.dumps(response, indent=2, ensure_ascii=False))


def fail(
    command: str,
    message: str,
    json_output: bool,
    suggestions: Optional[list[str]] = None,
) -> NoReturn:
    """Report an error in the requested format and exit with code 1."""
    if json_output:
        output_json(error_envelope(command, message, suggestions or ()).to_dict())
    else:
        console.print(f"[red]Error: {escape(message)}[/red]")
        for suggestion in suggestions or []:
            console.print(f"[dim]{suggestion}[/dim]")
    raise typer.Exit(1)


def build_profile(
    profile_file: Optional[Path],
    age: Optional[float],
    gender: Optional[str],
    height: Optional[float],
    weight: Optional[float],
    activity: Optional[str],
    goal: Optional[str],
    restrictions: Optional[list[str]],
) -> ClientProfile:
    """Build a profile from an optional YAML/JSON file plus command-line overrides.

    Raises:
        InvalidProfile: If the combined data is not a usable profile
    """
    data: dict = {}
    if profile_file is not None:
        try:
            with open(profile_file) as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise InvalidProfile(f"Cannot read profile file {profile_file}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise InvalidProfile(f"Profile file {profile_file} must contain a mapping")
        data.update(loaded)

    overrides = {
        "age": age,
        "gender": gender,
        "height_cm": height,
        "weight_kg": weight,
        "activity_level": activity,
        "goal": goal,
        "dietary_restrictions": restrictions or None,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ClientProfile.from_dict(data)


def resolve_catalog(catalog_path: Optional[Path]) -> TemplateCatalog:
    """Catalog from the command line, the config file or the built-in templates."""
    path = catalog_path or get_settings().catalog.path
    if path is None:
        return default_catalog()
    return load_catalog(path)


PROFILE_HELP = (
    "Profile values come from --profile (YAML or JSON) and/or the individual "
    "options; options win."
)


# ============================================================================
# Core Commands
# ============================================================================


@app.command()
def targets(
    profile_file: Optional[Path] = typer.Option(None, "--profile", "-p", help="Profile YAML/JSON file"),
    age: Optional[float] = typer.Option(None, "--age", help="Age in years"),
    gender: Optional[str] = typer.Option(None, "--gender", help="male or female"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    activity: Optional[str] = typer.Option(None, "--activity", help="sedentary, light, moderate, intense, very_intense"),
    goal: Optional[str] = typer.Option(None, "--goal", help="maintenance, weight_loss, muscle_gain, health"),
    restrictions: Optional[list[str]] = typer.Option(None, "--restriction", "-r", help="Dietary restriction (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Calculate BMR, TDEE, calorie target and macros for a client."""
    try:
        profile = build_profile(profile_file, age, gender, height, weight, activity, goal, restrictions)
        energy = calculate_energy_targets(profile)
    except InvalidProfile as exc:
        fail("targets", str(exc), json_output, [PROFILE_HELP])

    if json_output:
        output_json(targets_envelope(profile, energy).to_dict())
        return

    console.print(Panel(energy.summary(), title="Energy Targets"))
    for warning in energy_warnings(energy):
        console.print(f"[yellow]Warning: {warning}[/yellow]")


@app.command()
def plan(
    profile_file: Optional[Path] = typer.Option(None, "--profile", "-p", help="Profile YAML/JSON file"),
    age: Optional[float] = typer.Option(None, "--age", help="Age in years"),
    gender: Optional[str] = typer.Option(None, "--gender", help="male or female"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    activity: Optional[str] = typer.Option(None, "--activity", help="sedentary, light, moderate, intense, very_intense"),
    goal: Optional[str] = typer.Option(None, "--goal", help="maintenance, weight_loss, muscle_gain, health"),
    restrictions: Optional[list[str]] = typer.Option(None, "--restriction", "-r", help="Dietary restriction (repeatable)"),
    slots: Optional[int] = typer.Option(None, "--slots", help="Number of meals (default from config)"),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: table, json, markdown"
    ),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Template catalog YAML"),
    json_output: bool = typer.Option(False, "--json", help="Output as agent JSON envelope"),
) -> None:
    """Assemble a draft meal plan from a client profile."""
    from nutriplan.export.formatters import format_plan

    settings = get_settings()
    slot_count = slots if slots is not None else settings.planning.slot_count
    output_format = output_format or settings.defaults.output_format

    try:
        profile = build_profile(profile_file, age, gender, height, weight, activity, goal, restrictions)
    except InvalidProfile as exc:
        fail("plan", str(exc), json_output, [PROFILE_HELP])

    try:
        catalog = resolve_catalog(catalog_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        fail("plan", f"Cannot load template catalog: {exc}", json_output)

    try:
        matcher = TemplateMatcher(catalog, settings.planning.match_tolerance_kcal)
        draft = generate_meal_plan(
            profile,
            matcher=matcher,
            slot_count=slot_count,
            min_daily_kcal=settings.validation.min_daily_kcal,
        )
    except ValueError as exc:
        fail("plan", str(exc), json_output)

    if json_output:
        output_json(plan_envelope(draft).to_dict())
        return

    try:
        rendered = format_plan(draft, output_format, console)
    except ValueError as exc:
        fail("plan", str(exc), json_output, ["Use one of: table, json, markdown"])
    if rendered is not None:
        print(rendered)


@app.command()
def validate(
    plan_file: Path = typer.Argument(..., help="Plan JSON file or saved model response"),
    profile_file: Optional[Path] = typer.Option(None, "--profile", "-p", help="Profile YAML/JSON file"),
    age: Optional[float] = typer.Option(None, "--age", help="Age in years"),
    gender: Optional[str] = typer.Option(None, "--gender", help="male or female"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    activity: Optional[str] = typer.Option(None, "--activity", help="sedentary, light, moderate, intense, very_intense"),
    goal: Optional[str] = typer.Option(None, "--goal", help="maintenance, weight_loss, muscle_gain, health"),
    restrictions: Optional[list[str]] = typer.Option(None, "--restriction", "-r", help="Dietary restriction (repeatable)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Check an externally produced plan against the client's targets."""
    try:
        profile = build_profile(profile_file, age, gender, height, weight, activity, goal, restrictions)
        calculated = CalculatedData.for_profile(profile)
    except InvalidProfile as exc:
        fail("validate", str(exc), json_output, [PROFILE_HELP])

    try:
        text = plan_file.read_text(encoding="utf-8")
    except OSError as exc:
        fail("validate", f"Cannot read {plan_file}: {exc}", json_output)

    try:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError:
            raw = extract_json_object(text)
        external = parse_external_plan(raw, calculated)
    except PlanFormatError as exc:
        fail("validate", str(exc), json_output)

    result = validate_plan(external, get_settings().validation)

    if json_output:
        output_json(validation_envelope(external, result).to_dict())
        return

    table = Table(title="Plan Totals")
    table.add_column("Meal", style="cyan")
    table.add_column("Items", justify="right")
    table.add_column("kcal", justify="right")
    table.add_column("Protein", justify="right")
    table.add_column("Carb", justify="right")
    table.add_column("Fat", justify="right")
    for meal in external.meals:
        totals = meal.totals
        table.add_row(
            meal.name,
            str(len(meal.items)),
            f"{totals.kcal:.0f}",
            f"{totals.protein:.1f}g",
            f"{totals.carb:.1f}g",
            f"{totals.fat:.1f}g",
        )
    console.print(table)
    console.print(
        f"Target: {external.target_calories} kcal, {external.macros.protein_g}g protein"
    )

    if result.valid:
        console.print("[green]No warnings[/green]")
    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")


@app.command()
def prompt(
    profile_file: Optional[Path] = typer.Option(None, "--profile", "-p", help="Profile YAML/JSON file"),
    age: Optional[float] = typer.Option(None, "--age", help="Age in years"),
    gender: Optional[str] = typer.Option(None, "--gender", help="male or female"),
    height: Optional[float] = typer.Option(None, "--height", help="Height in cm"),
    weight: Optional[float] = typer.Option(None, "--weight", help="Weight in kg"),
    activity: Optional[str] = typer.Option(None, "--activity", help="sedentary, light, moderate, intense, very_intense"),
    goal: Optional[str] = typer.Option(None, "--goal", help="maintenance, weight_loss, muscle_gain, health"),
    restrictions: Optional[list[str]] = typer.Option(None, "--restriction", "-r", help="Dietary restriction (repeatable)"),
    system: bool = typer.Option(False, "--system", help="Also print the system prompt"),
) -> None:
    """Print the request text for an external plan source."""
    from nutriplan.export.llm_prompt import SYSTEM_PROMPT, build_plan_prompt

    try:
        profile = build_profile(profile_file, age, gender, height, weight, activity, goal, restrictions)
        calculated = CalculatedData.for_profile(profile)
    except InvalidProfile as exc:
        fail("prompt", str(exc), False, [PROFILE_HELP])

    if system:
        print(SYSTEM_PROMPT)
        print()
    print(build_plan_prompt(profile, calculated))


# ============================================================================
# Template Subcommands
# ============================================================================


@templates_app.command("list")
def templates_list(
    meal_type: Optional[str] = typer.Option(None, "--meal-type", "-m", help="Filter by meal type"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Template catalog YAML"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List meal templates."""
    try:
        catalog = resolve_catalog(catalog_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        fail("templates list", f"Cannot load template catalog: {exc}", json_output)

    templates = list(catalog)
    if meal_type:
        try:
            templates = catalog.by_meal_type(MealType(meal_type.strip().lower()))
        except ValueError:
            allowed = ", ".join(m.value for m in MealType)
            fail("templates list", f"Unknown meal type '{meal_type}'", json_output, [f"Use one of: {allowed}"])

    if json_output:
        output_json(templates_envelope(templates).to_dict())
        return

    table = Table(title="Meal Templates")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Meal Type")
    table.add_column("kcal", justify="right")
    table.add_column("Tags", style="dim")
    for t in templates:
        table.add_row(t.id, t.name, t.meal_type.value, f"{t.target_kcal:.0f}", ", ".join(sorted(t.tags)))
    console.print(table)


@templates_app.command("show")
def templates_show(
    template_id: str = typer.Argument(..., help="Template ID"),
    catalog_path: Optional[Path] = typer.Option(None, "--catalog", help="Template catalog YAML"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show a meal template with its items."""
    try:
        catalog = resolve_catalog(catalog_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        fail("templates show", f"Cannot load template catalog: {exc}", json_output)

    template = catalog.get(template_id)
    if template is None:
        fail(
            "templates show",
            f"Template '{template_id}' not found",
            json_output,
            ["Use 'nutriplan templates list' to see valid IDs"],
        )

    if json_output:
        output_json(template_envelope(template).to_dict())
        return

    console.print(f"\n[bold]{template.name}[/bold] ({template.id})")
    console.print(template.description)
    console.print(f"Meal type: {template.meal_type.value} | {template.target_kcal:.0f} kcal")
    if template.tags:
        console.print(f"Tags: {', '.join(sorted(template.tags))}")

    table = Table()
    table.add_column("Food")
    table.add_column("Quantity", justify="right")
    table.add_column("Measure")
    table.add_column("Category", style="dim")
    for entry in template.items:
        name = f"{entry.food_name} [dim](optional)[/dim]" if entry.optional else entry.food_name
        table.add_row(name, f"{entry.quantity:g}", entry.measure_name, entry.category.value)
    console.print(table)


# ============================================================================
# Schema Subcommands
# ============================================================================


@schema_app.command("plan")
def schema_plan() -> None:
    """Show the external plan request/response contract."""
    from nutriplan.agent.schema import get_plan_schema
    output_json(get_plan_schema())


@schema_app.command("restrictions")
def schema_restrictions() -> None:
    """List supported dietary restrictions."""
    from nutriplan.agent.schema import get_restriction_list
    output_json(get_restriction_list())


# ============================================================================
# Config Subcommands
# ============================================================================


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration as YAML."""
    print(yaml.dump(get_settings().to_dict(), default_flow_style=False, sort_keys=False), end="")


if __name__ == "__main__":
    app()
