"""Text formatters for quotes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cabinet_quotes.domain.value_objects import AdjustmentType

if TYPE_CHECKING:
    from cabinet_quotes.application.dtos import QuoteSummary
    from cabinet_quotes.domain.entities import Quote


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def format_percentage(value: float) -> str:
    """Render 10.0 as "10", 12.5 as "12.5"."""
    return f"{value:g}"


class QuoteSummaryFormatter:
    """Formats the price summary of a quote.

    The adjustment line is shown only once an adjustment has been applied.
    """

    WIDTH = 40

    def format(self, summary: QuoteSummary) -> str:
        figures = summary.figures
        quote = summary.quote
        lines = [
            "QUOTE SUMMARY",
            "=" * self.WIDTH,
            self._row("Subtotal", format_currency(figures.subtotal)),
        ]

        if quote.adjustment_type is not None:
            label = quote.adjustment_type.value.title()
            percentage = format_percentage(quote.adjustment_percentage or 0.0)
            sign = "-" if quote.adjustment_type is AdjustmentType.DISCOUNT else "+"
            lines.append(
                self._row(
                    f"{label} ({percentage}%)",
                    f"{sign}{format_currency(figures.adjustment_amount)}",
                )
            )

        lines.append(
            self._row(
                f"Tax ({format_percentage(figures.tax_rate * 100)}%)",
                format_currency(figures.tax),
            )
        )
        lines.append("-" * self.WIDTH)
        lines.append(self._row("Total", format_currency(figures.total)))
        return "\n".join(lines)

    def _row(self, label: str, value: str) -> str:
        return f"{label:<{self.WIDTH - len(value)}}{value}"


class QuoteDetailFormatter:
    """Formats client details and spaces of a quote."""

    def format(self, quote: Quote) -> str:
        lines = [
            f"QUOTE {quote.short_id}" if quote.id else "QUOTE (unsaved)",
            "=" * 70,
            f"Client:    {quote.client_name}",
            f"Email:     {quote.email}",
            f"Phone:     {quote.phone}",
            f"Project:   {quote.project_name}",
            f"Address:   {quote.installation_address}",
            "",
        ]

        if not quote.spaces:
            lines.append("No spaces in quote.")
            return "\n".join(lines)

        for space in quote.spaces:
            lines.append(f"{space.name}  [{space.id}]")
            lines.append("-" * 70)
            if not space.items:
                lines.append("  (no items)")
            for item in space.items:
                lines.append(
                    f"  {item.id:<38} {item.width:>6g} x {item.height:>6g} x {item.depth:>6g}"
                    f"  {format_currency(item.price):>12}"
                )
            lines.append(f"{'Space subtotal':<56}{format_currency(space.subtotal):>14}")
            lines.append("")

        return "\n".join(lines).rstrip("\n")
