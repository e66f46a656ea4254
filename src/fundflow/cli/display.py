"""Balance matrix rendering shared by the CLI commands."""

from typing import Optional, Sequence

import click

from fundflow.domain.calculator import get_balance, get_fund_total, get_grand_total, get_type_total
from fundflow.domain.entities import Balance, ContributionType, Fund
from fundflow.utils.amount_parser import format_currency

NAME_WIDTH = 26
MIN_COLUMN_WIDTH = 12


def _column_width(name: str) -> int:
    return max(len(name), MIN_COLUMN_WIDTH) + 2


def echo_balance_matrix(
    funds: Sequence[Fund],
    contribution_types: Sequence[ContributionType],
    balances: Sequence[Balance],
    baseline: Optional[Sequence[Balance]] = None,
) -> None:
    """Print funds as rows and contribution types as columns.

    With ``baseline`` (the current balances), a Change column shows how each
    fund total would move.
    """
    widths = [_column_width(t.name) for t in contribution_types]
    header = f"{'Investment':<{NAME_WIDTH}}"
    header += "".join(f"{t.name:>{w}}" for t, w in zip(contribution_types, widths))
    header += f"{'Total':>14}"
    if baseline is not None:
        header += f"{'Change':>14}"
    rule = "-" * len(header)

    click.echo(header)
    click.echo(rule)
    for fund in funds:
        line = f"{fund.name[:NAME_WIDTH - 1]:<{NAME_WIDTH}}"
        for t, w in zip(contribution_types, widths):
            line += f"{format_currency(get_balance(balances, fund.id, t.id)):>{w}}"
        total = get_fund_total(balances, fund.id)
        line += f"{format_currency(total):>14}"
        if baseline is not None:
            change = total - get_fund_total(baseline, fund.id)
            sign = "+" if change >= 0.5 else ""
            line += f"{sign + format_currency(change):>14}"
        click.echo(line)

    click.echo(rule)
    line = f"{'Total':<{NAME_WIDTH}}"
    for t, w in zip(contribution_types, widths):
        line += f"{format_currency(get_type_total(balances, t.id)):>{w}}"
    line += f"{format_currency(get_grand_total(balances)):>14}"
    click.echo(line)
