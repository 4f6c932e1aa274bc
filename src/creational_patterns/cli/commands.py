"""
CLI command handlers.

Each handler runs one pattern demonstration through its application service
and returns the report data together with its plain text rendering.
"""
import argparse
from typing import Any, Dict, List, Optional, Tuple

from creational_patterns.app import Application
from creational_patterns.cli.formatters import format_sections

CommandResult = Tuple[Dict[str, Any], str]


def _selected_variants(requested: Optional[List[str]], configured: Optional[str]) -> Optional[List[str]]:
    if requested:
        return requested
    if configured:
        return [configured]
    return None


def handle_prototype(app: Application, args: argparse.Namespace) -> CommandResult:
    """Clone a prototype and report the three observations."""
    primitive = getattr(args, "primitive", None)
    service = app.prototype_service
    report = service.run_demo() if primitive is None else service.run_demo(primitive)
    return {"prototype": report.to_dict()}, format_sections([report.messages])


def handle_abstract_factory(app: Application, args: argparse.Namespace) -> CommandResult:
    """Run the abstract factory client against the selected factories."""
    variants = _selected_variants(getattr(args, "variant", None), app.config.abstract_factory.default_variant)
    reports = app.abstract_factory_service.run(variants)
    data = {"abstract_factory": [report.to_dict() for report in reports]}
    return data, format_sections([report.messages for report in reports], blank_line_between=True)


def handle_factory_method(app: Application, args: argparse.Namespace) -> CommandResult:
    """Run the factory method client against the selected creators."""
    variants = _selected_variants(getattr(args, "creator", None), app.config.factory_method.default_variant)
    reports = app.factory_method_service.run(variants)
    data = {"factory_method": [report.to_dict() for report in reports]}
    return data, format_sections([report.messages for report in reports], blank_line_between=False)


def handle_all(app: Application, args: argparse.Namespace) -> CommandResult:
    """Run every demonstration with its defaults."""
    data: Dict[str, Any] = {}
    texts: List[str] = []
    for handler in (handle_abstract_factory, handle_factory_method, handle_prototype):
        section_data, section_text = handler(app, argparse.Namespace())
        data.update(section_data)
        texts.append(section_text)
    return data, "\n\n".join(texts)


def handle_variants(app: Application, args: argparse.Namespace) -> CommandResult:
    """List the registered factories and creators."""
    data = {
        "factories": _describe_variants(app.factory_registry),
        "creators": _describe_variants(app.creator_registry),
    }
    lines = []
    for kind in ("factories", "creators"):
        lines.append(f"{kind}:")
        for variant in data[kind]:
            aliases = f" ({', '.join(variant['aliases'])})" if variant["aliases"] else ""
            lines.append(f"  {variant['name']}{aliases}: {variant['class']}")
    return data, "\n".join(lines)


def _describe_variants(registry) -> List[Dict[str, Any]]:
    described = []
    for name in registry.list_variants():
        registration = registry.resolve(name)
        described.append({
            "name": registration.name,
            "aliases": list(registration.aliases),
            "class": registration.variant_class.__name__,
        })
    return described


COMMAND_HANDLERS = {
    "prototype": handle_prototype,
    "abstract-factory": handle_abstract_factory,
    "factory-method": handle_factory_method,
    "all": handle_all,
    "variants": handle_variants,
}
