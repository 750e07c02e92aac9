"""
orderwire CLI - Main entry point.

Encode orders into canonical actions, or sign and place them.
"""

import asyncio
import json
from decimal import Decimal, InvalidOperation

import click
import httpx
import structlog

from orderwire import __version__
from orderwire.config import config
from orderwire.encoding import (
    Cloid,
    Grouping,
    LimitOrderType,
    OrderRequest,
    Tif,
    Tpsl,
    TriggerOrderType,
)
from orderwire.errors import OrderWireError
from orderwire.execution import OrderSubmitter, build_order_action
from orderwire.logging_config import configure_logging
from orderwire.signing import load_wallet

logger = structlog.get_logger()


def _decimal(ctx, param, value):
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"{value!r} is not a number")


def _cloid(ctx, param, value):
    if value is None:
        return None
    try:
        return Cloid.from_str(value)
    except OrderWireError as e:
        raise click.BadParameter(str(e))


def order_options(func):
    """Options shared by every command that builds an order."""
    options = [
        click.option('--coin', required=True, help='Coin symbol, e.g. BTC'),
        click.option(
            '--side',
            type=click.Choice(['buy', 'sell']),
            required=True,
            help='Order side',
        ),
        click.option('--size', required=True, callback=_decimal, help='Order size'),
        click.option('--price', required=True, callback=_decimal, help='Limit price'),
        click.option(
            '--tif',
            type=click.Choice([t.value for t in Tif]),
            default=Tif.GTC.value,
            show_default=True,
            help='Time in force (limit orders)',
        ),
        click.option('--trigger-px', callback=_decimal, help='Trigger price; makes a trigger order'),
        click.option(
            '--tpsl',
            type=click.Choice([t.value for t in Tpsl]),
            help='Trigger purpose (with --trigger-px)',
        ),
        click.option('--market/--limit', 'is_market', default=False, help='Trigger fills at market'),
        click.option('--reduce-only', is_flag=True, help='Only reduce an existing position'),
        click.option('--cloid', callback=_cloid, help='0x-prefixed 16-byte client order id'),
        click.option(
            '--grouping',
            type=click.Choice([g.value for g in Grouping]),
            default=Grouping.NA.value,
            show_default=True,
            help='Grouping mode',
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_request(coin, side, size, price, tif, trigger_px, tpsl, is_market, reduce_only, cloid):
    if trigger_px is not None:
        if tpsl is None:
            raise click.UsageError("--tpsl is required with --trigger-px")
        order_type = TriggerOrderType(
            trigger_px=trigger_px,
            is_market=is_market,
            tpsl=Tpsl(tpsl),
        )
    else:
        order_type = LimitOrderType(tif=Tif(tif))

    return OrderRequest(
        coin=coin,
        is_buy=side == 'buy',
        sz=size,
        limit_px=price,
        order_type=order_type,
        reduce_only=reduce_only,
        cloid=cloid,
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose):
    """
    orderwire - Canonical order encoding and placement.

    \b
    Examples:
        orderwire encode --coin BTC --asset 0 --side buy --size 0.001 --price 90000
        orderwire place --coin ETH --side sell --size 0.5 --price 3500 --tif Alo
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    configure_logging(level='debug' if verbose else None)


@cli.command()
@order_options
@click.option('--asset', type=click.IntRange(min=0), required=True, help='Asset index of the coin')
def encode(coin, side, size, price, tif, trigger_px, tpsl, is_market, reduce_only, cloid, grouping, asset):
    """Print the canonical order action as JSON, without signing."""
    request = build_request(coin, side, size, price, tif, trigger_px, tpsl, is_market, reduce_only, cloid)

    try:
        action = build_order_action([request], {coin: asset}, grouping)
    except OrderWireError as e:
        raise click.ClickException(str(e))

    click.echo(json.dumps(action.to_dict()))


@cli.command()
@order_options
@click.option('--private-key', envvar='SIGNING_PRIVATE_KEY', help='Signing key (default: SIGNING_PRIVATE_KEY)')
@click.option('--vault-address', help='Vault or subaccount address')
def place(coin, side, size, price, tif, trigger_px, tpsl, is_market, reduce_only, cloid, grouping,
          private_key, vault_address):
    """Sign the order action and submit it to the exchange."""
    request = build_request(coin, side, size, price, tif, trigger_px, tpsl, is_market, reduce_only, cloid)

    try:
        wallet = load_wallet(private_key)
    except ValueError as e:
        raise click.ClickException(str(e))

    async def submit():
        submitter = OrderSubmitter(wallet, vault_address=vault_address)
        try:
            return await submitter.bulk_orders([request], grouping)
        finally:
            await submitter.close()

    try:
        submission = asyncio.run(submit())
    except OrderWireError as e:
        raise click.ClickException(str(e))
    except httpx.HTTPError as e:
        raise click.ClickException(f"Exchange request failed: {e}")

    click.echo(f"Submitted to {config.exchange.base_url} (nonce {submission.nonce})")
    click.echo(json.dumps(submission.response, indent=2))


__all__ = ["cli"]
