"""Chart data preparation and Altair chart builders for the dashboard."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

import altair as alt

from src.domain.constants import CURRENCY_SYMBOLS, MONTH_LABELS
from src.domain.models import AssetCategoryBreakdown, EntityMetrics
from src.domain.services.aggregation import read_field
from src.utils.datetime_utils import coerce_datetime, utc_now

PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]


def format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbol = CURRENCY_SYMBOLS.get(currency_code, f"{currency_code} ")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_time_ago(value, now: datetime | None = None) -> str:
    """Return a relative "last updated" label.

    Args:
        value: Timestamp as datetime, date or ISO string.
        now: Reference time, defaults to the current UTC time.

    Returns:
        str: "Just now", "<n>m ago", "<n>h ago", "<n>d ago", the date for
        anything older than a week, or "Never" when there is no timestamp.
    """
    moment = coerce_datetime(value)
    if moment is None:
        return "Never"
    reference = now or utc_now()
    seconds = (reference - moment).total_seconds()
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)
    days = int(seconds // 86400)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    return moment.strftime("%b %d, %Y")


def prepare_donut_chart_data(
    breakdown: AssetCategoryBreakdown,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Aggregated totals by type.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        breakdown.categories,
        key=lambda item: item.amount,
        reverse=True,
    )
    top_items = [
        (item.label or item.category, item.amount)
        for item in sorted_items[:max_categories]
    ]
    other_amount = sum(
        (item.amount for item in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(("Other", other_amount))
    total_amount = sum(
        (item.amount for item in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for category, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": format_currency(
                    amount,
                    breakdown.currency_code,
                ),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def prepare_monthly_data(
    monthly_totals: Sequence[Decimal],
) -> list[dict[str, str | float | int]]:
    """Pair the 12 monthly totals with their month labels."""
    return [
        {"month": label, "order": index, "amount": float(amount)}
        for index, (label, amount) in enumerate(
            zip(MONTH_LABELS, monthly_totals)
        )
    ]


def prepare_member_bar_data(
    metrics: Sequence[EntityMetrics],
) -> list[dict[str, str | float]]:
    """Return one bar per member with a positive net worth."""
    return [
        {
            "member": str(read_field(item.entity, "name")),
            "net_worth": float(item.net_worth),
        }
        for item in metrics
        if item.net_worth > 0
    ]


def build_donut_chart(
    data: list[dict[str, str | float]],
    chart_size: int = 300,
    legend_columns: int = 2,
) -> alt.LayerChart:
    """Build the donut chart with a hover label in the middle."""
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=PALETTE),
            legend=alt.Legend(
                orient="bottom",
                title=None,
                direction="horizontal",
                columns=legend_columns,
                labelLimit=180,
            ),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(text="amount_label:N")
    return alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )


def build_bar_chart(
    data: list[dict[str, str | float]],
    x_field: str,
    y_field: str,
    title: str | None = None,
) -> alt.Chart:
    """Build a simple vertical bar chart."""
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
        color=PALETTE[0],
    ).encode(
        x=alt.X(f"{x_field}:N", sort="-y", title=None),
        y=alt.Y(f"{y_field}:Q", title=None),
        tooltip=[alt.Tooltip(f"{x_field}:N"), alt.Tooltip(f"{y_field}:Q")],
    )
    if title:
        chart = chart.properties(title=title)
    return chart


def build_monthly_chart(
    data: list[dict[str, str | float | int]],
) -> alt.Chart:
    """Build the month-by-month line chart."""
    return alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        color=PALETTE[1],
    ).encode(
        x=alt.X(
            "month:N",
            sort=list(MONTH_LABELS),
            title=None,
        ),
        y=alt.Y("amount:Q", title=None),
        tooltip=[alt.Tooltip("month:N"), alt.Tooltip("amount:Q")],
    )


__all__ = [
    "format_currency",
    "format_time_ago",
    "prepare_donut_chart_data",
    "prepare_monthly_data",
    "prepare_member_bar_data",
    "build_donut_chart",
    "build_bar_chart",
    "build_monthly_chart",
]
