import json
import logging
import sys

import click

from . import __version__ as VERSION
from .config import refresh_config
from .errors import InvalidItemPriceError, InvalidQuantityError, OrderPriceError
from .order import Order

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.pass_context
@click.option("--version", is_flag=True, help="Show the version and exit.")
def main(ctx, version):
    """orderprice: order total calculator"""
    config = refresh_config()
    ctx.obj = {"config": config}
    logging.basicConfig(level=config.log_level)

    if version:
        click.echo(f"orderprice version {VERSION}")
        return
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _emit_structured_error(message: str, *, code: str, category: str, as_json: bool = False, indent: int = 2):
    payload = {
        "ok": False,
        "error": {
            "code": code,
            "category": category,
            "message": message,
        },
    }
    if as_json:
        click.echo(json.dumps(payload, indent=indent, sort_keys=True))
    else:
        click.echo(f"orderprice error [{category}:{code}]: {message}")
    sys.exit(2)


def _parse_quantity(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidQuantityError(f"quantity must be an integer, got {raw!r}") from exc


def _parse_item_price(raw: str) -> float:
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidItemPriceError(f"item price must be a real number, got {raw!r}") from exc


def _format_amount(value, precision: int) -> str:
    return f"{value:.{precision}f}"


@main.command()
@click.option("--quantity", "-q", required=True, help="Units ordered")
@click.option("--item-price", "-p", required=True, help="Price per unit")
@click.option("--verbose", is_flag=True, help="Show base price, shipping and discount")
@click.option("--json", "json_output", is_flag=True, help="Emit the price breakdown as JSON")
@click.pass_context
def quote(ctx, quantity, item_price, verbose, json_output):
    """Compute the total charge for one order."""
    config = ctx.obj["config"]
    try:
        order = Order(quantity=_parse_quantity(quantity), item_price=_parse_item_price(item_price))
        breakdown = order.breakdown
    except OrderPriceError as exc:
        _emit_structured_error(
            exc.explanation, code=exc.error_code, category=exc.category, as_json=json_output, indent=config.json_indent
        )

    if json_output:
        click.echo(json.dumps({"ok": True, "breakdown": breakdown.as_dict()}, indent=config.json_indent, sort_keys=True))
        return

    precision = config.display_precision
    if verbose:
        click.echo(f"Base price: {_format_amount(breakdown.base_price, precision)}")
        click.echo(f"Shipping:   {_format_amount(breakdown.shipping, precision)}")
        click.echo(f"Discount:   {_format_amount(breakdown.discount, precision)}")
    click.echo(f"Total: {_format_amount(breakdown.total, precision)}")


if __name__ == "__main__":
    main()
