"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import streamlit as st

from src.adapters.interface.streamlit.charts import (
    build_bar_chart,
    build_donut_chart,
    build_monthly_chart,
    format_currency,
    format_time_ago,
    prepare_donut_chart_data,
    prepare_member_bar_data,
    prepare_monthly_data,
)
from src.application.errors import (
    AuthenticationError,
    RecordValidationError,
    RemoteOperationError,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import (
    ASSET_TYPE_LABELS,
    ASSET_TYPES,
    DEBT_TYPE_LABELS,
    DEBT_TYPES,
    PAYMENT_FREQUENCIES,
    RELATION_LABELS,
    RELATIONS,
    SUPPORTED_CURRENCIES,
)
from src.domain.models import AssetCategoryBreakdown
from src.infrastructure.container import (
    TrackerServices,
    build_database_adapter,
    build_services,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.datetime_utils import coerce_date

PAGES = ["Dashboard", "Assets", "Debts", "Family"]


@st.cache_resource(show_spinner=False)
def _load_database_adapter() -> DatabaseEnginePort:
    """Share one database adapter (and its pool) across sessions."""
    return build_database_adapter()


def _get_services() -> TrackerServices:
    """Return the use cases bound to the current browser session."""
    services = st.session_state.get("services")
    if services is None:
        services = build_services(db_port=_load_database_adapter())
        st.session_state["services"] = services
    return services


def _type_label(entity: str, value: str) -> str:
    labels = ASSET_TYPE_LABELS if "asset" in entity else DEBT_TYPE_LABELS
    return labels.get(value, value)


def _asset_rows(records: Sequence[Any]) -> list[dict[str, str]]:
    """Table rows for asset records."""
    return [
        {
            "Name": record.name,
            "Type": _type_label("assets", record.type),
            "Value": format_currency(record.value, record.currency),
            "Updated": format_time_ago(
                record.updated_at or record.created_at
            ),
        }
        for record in records
    ]


def _debt_rows(records: Sequence[Any]) -> list[dict[str, str]]:
    """Table rows for debt records."""
    return [
        {
            "Lender": record.lender,
            "Type": _type_label("debts", record.type),
            "Principal": format_currency(record.principal, record.currency),
            "Balance": format_currency(record.balance, record.currency),
            "Rate": (
                f"{record.interest_rate}%"
                if record.interest_rate is not None
                else "-"
            ),
            "Updated": format_time_ago(
                record.updated_at or record.created_at
            ),
        }
        for record in records
    ]


def _record_caption(record: Any) -> str:
    """Short label used in edit/delete pickers."""
    if hasattr(record, "lender"):
        return f"{record.lender} ({_type_label('debts', record.type)})"
    if hasattr(record, "relation"):
        return f"{record.name} ({RELATION_LABELS.get(record.relation)})"
    return f"{record.name} ({_type_label('assets', record.type)})"


def _show_errors(exc: Exception) -> None:
    """Surface an error the way its kind calls for."""
    if isinstance(exc, RecordValidationError):
        for field_name, message in exc.field_errors.items():
            st.error(f"{field_name}: {message}")
    elif isinstance(exc, AuthenticationError):
        st.error(str(exc))
    else:
        st.toast(f"Something went wrong: {exc}")


def _submit(
    services: TrackerServices,
    entity: str,
    data: dict[str, Any],
    record_id: str | None = None,
) -> bool:
    """Validate and persist form input, reporting the outcome."""
    try:
        result = services.submit_for(entity).execute(data, record_id)
    except (
        RecordValidationError,
        AuthenticationError,
        RemoteOperationError,
    ) as exc:
        get_app_logger().warning(f"Submitting {entity} failed: {exc}")
        _show_errors(exc)
        return False
    st.toast(result.message)
    return True


def _delete(services: TrackerServices, entity: str, record_id: str) -> bool:
    try:
        services.access_for(entity).delete(record_id)
    except (AuthenticationError, RemoteOperationError) as exc:
        get_app_logger().warning(f"Deleting {entity} failed: {exc}")
        _show_errors(exc)
        return False
    st.toast("Deleted successfully")
    return True


def _asset_fields(key: str, record: Any | None = None) -> dict[str, Any]:
    """Render asset inputs inside the current form."""
    current_type = record.type if record else "cash"
    currency = record.currency if record else _default_currency()
    return {
        "name": st.text_input(
            "Name",
            value=record.name if record else "",
            key=f"{key}_name",
        ),
        "type": st.selectbox(
            "Type",
            ASSET_TYPES,
            index=ASSET_TYPES.index(current_type),
            format_func=ASSET_TYPE_LABELS.get,
            key=f"{key}_type",
        ),
        "subtype": st.text_input(
            "Subtype",
            value=(record.subtype or "") if record else "",
            key=f"{key}_subtype",
        )
        or None,
        "value": Decimal(
            str(
                st.number_input(
                    "Value",
                    min_value=0.0,
                    value=float(record.value) if record else 0.0,
                    step=100.0,
                    key=f"{key}_value",
                )
            )
        ),
        "currency": _currency_select(key, currency),
    }


def _merge_metadata(
    record: Any | None,
    entered: dict[str, Any],
) -> dict[str, Any]:
    """Overlay form inputs on stored metadata; cleared inputs drop keys."""
    merged = dict(record.metadata or {}) if record else {}
    for name, value in entered.items():
        if value:
            merged[name] = value
        else:
            merged.pop(name, None)
    return merged


def _notes_field(key: str, record: Any | None) -> str:
    stored = (record.metadata or {}) if record else {}
    return st.text_area(
        "Notes",
        value=stored.get("notes", ""),
        key=f"{key}_notes",
    ).strip()


def _payment_fields(key: str, record: Any | None) -> dict[str, Any]:
    """Account and repayment details kept in a debt's metadata."""
    stored = (record.metadata or {}) if record else {}
    frequencies = ["", *PAYMENT_FREQUENCIES]
    current_frequency = stored.get("payment_frequency", "")
    if current_frequency not in frequencies:
        frequencies.append(current_frequency)
    next_payment = st.date_input(
        "Next payment date",
        value=coerce_date(stored.get("next_payment_date")),
        key=f"{key}_next_payment",
    )
    return {
        "account_number": st.text_input(
            "Account number",
            value=stored.get("account_number", ""),
            key=f"{key}_account_number",
        ).strip(),
        "payment_frequency": st.selectbox(
            "Payment frequency",
            frequencies,
            index=frequencies.index(current_frequency),
            format_func=lambda value: value.capitalize() or "-",
            key=f"{key}_frequency",
        ),
        "next_payment_date": (
            next_payment.isoformat() if next_payment else ""
        ),
    }


def _debt_fields(key: str, record: Any | None = None) -> dict[str, Any]:
    """Render debt inputs inside the current form."""
    current_type = record.type if record else "personal"
    currency = record.currency if record else _default_currency()
    rate = st.number_input(
        "Interest rate (%)",
        min_value=0.0,
        value=(
            float(record.interest_rate)
            if record and record.interest_rate is not None
            else None
        ),
        step=0.1,
        key=f"{key}_rate",
    )
    term = st.number_input(
        "Term (years)",
        min_value=1,
        value=record.term_years if record else None,
        step=1,
        key=f"{key}_term",
    )
    return {
        "lender": st.text_input(
            "Lender",
            value=record.lender if record else "",
            key=f"{key}_lender",
        ),
        "type": st.selectbox(
            "Type",
            DEBT_TYPES,
            index=DEBT_TYPES.index(current_type),
            format_func=DEBT_TYPE_LABELS.get,
            key=f"{key}_type",
        ),
        "principal": Decimal(
            str(
                st.number_input(
                    "Principal",
                    min_value=0.0,
                    value=float(record.principal) if record else 0.0,
                    step=100.0,
                    key=f"{key}_principal",
                )
            )
        ),
        "balance": Decimal(
            str(
                st.number_input(
                    "Outstanding balance",
                    min_value=0.0,
                    value=float(record.balance) if record else 0.0,
                    step=100.0,
                    key=f"{key}_balance",
                )
            )
        ),
        "interest_rate": Decimal(str(rate)) if rate is not None else None,
        "term_years": int(term) if term is not None else None,
        "currency": _currency_select(key, currency),
    }


def _member_fields(key: str, record: Any | None = None) -> dict[str, Any]:
    """Render family member inputs inside the current form."""
    current_relation = record.relation if record else RELATIONS[0]
    return {
        "name": st.text_input(
            "Name",
            value=record.name if record else "",
            key=f"{key}_name",
        ),
        "relation": st.selectbox(
            "Relation",
            RELATIONS,
            index=RELATIONS.index(current_relation),
            format_func=RELATION_LABELS.get,
            key=f"{key}_relation",
        ),
        "avatar_url": st.text_input(
            "Avatar URL",
            value=(record.avatar_url or "") if record else "",
            key=f"{key}_avatar",
        ),
    }


def _default_currency() -> str:
    """Default currency of the current session's settings."""
    return _get_services().settings.default_currency


def _currency_select(key: str, current: str) -> str:
    options = list(SUPPORTED_CURRENCIES)
    if current not in options:
        options.append(current)
    return st.selectbox(
        "Currency",
        options,
        index=options.index(current),
        key=f"{key}_currency",
    )


def _record_inputs(
    key: str,
    entity: str,
    record: Any | None = None,
) -> dict[str, Any]:
    """Render the inputs of ``entity`` and collect the submitted values.

    Metadata is only sent for entities whose form edits it, and then merged
    over what the record already stores.
    """
    if entity == "family_members":
        return _member_fields(key, record)
    if "debt" in entity:
        data = _debt_fields(key, record)
        entered = _payment_fields(key, record) if entity == "debts" else {}
    else:
        data = _asset_fields(key, record)
        if entity == "assets":
            return data
        entered = {}
    entered["notes"] = _notes_field(key, record)
    data["metadata"] = _merge_metadata(record, entered)
    return data


def _render_record_form(
    services: TrackerServices,
    entity: str,
    record: Any | None = None,
    family_member_id: str | None = None,
) -> None:
    """Render an add (no record) or edit (record given) form."""
    key = f"{entity}_{record.id if record else 'new'}_{family_member_id}"
    label = "Save changes" if record else "Add"
    with st.form(key, clear_on_submit=record is None):
        data = _record_inputs(key, entity, record)
        submitted = st.form_submit_button(label)
    if not submitted:
        return
    if family_member_id is not None:
        data["family_member_id"] = family_member_id
    if _submit(services, entity, data, record.id if record else None):
        st.rerun()


def _render_asset_category_chart(
    breakdown: AssetCategoryBreakdown,
    title: str,
    max_categories: int = 6,
    chart_size: int = 300,
) -> None:
    """Render a donut chart of amounts by type."""
    st.subheader(title)
    if not breakdown.categories:
        st.info("Nothing to chart yet.")
        return
    data, _ = prepare_donut_chart_data(
        breakdown,
        max_categories=max_categories,
    )
    st.altair_chart(
        build_donut_chart(data, chart_size=chart_size),
        use_container_width=True,
    )


def _render_dashboard(services: TrackerServices) -> None:
    summary = services.net_worth_summary().execute()
    currency_code = summary.currency_code
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        format_currency(summary.asset_total, currency_code),
    )
    liabilities_col.metric(
        "Liabilities",
        format_currency(summary.liability_total, currency_code),
    )
    net_worth_col.metric(
        "Net Worth",
        format_currency(summary.net_worth, currency_code),
    )

    if summary.asset_total == 0 and summary.liability_total == 0:
        st.subheader("Get started quickly")
        st.caption("Load a sample portfolio to explore the dashboard.")
        if st.button("Add sample data"):
            try:
                result = services.sample_data().execute()
            except (AuthenticationError, RemoteOperationError) as exc:
                _show_errors(exc)
                return
            st.toast(
                f"Added {result.asset_count} assets and "
                f"{result.debt_count} debts"
            )
            st.rerun()
        return

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_asset_category_chart(
            services.category_breakdown("assets").execute(),
            "Assets by Type",
            max_categories=5,
        )
    with chart_right:
        debts = services.category_breakdown("debts").execute()
        st.subheader("Debts by Type")
        if debts.categories:
            st.altair_chart(
                build_bar_chart(
                    [
                        {
                            "type": item.label or item.category,
                            "balance": float(item.amount),
                        }
                        for item in debts.categories
                    ],
                    "type",
                    "balance",
                ),
                use_container_width=True,
            )
        else:
            st.info("No debts recorded.")


def _render_records_page(services: TrackerServices, entity: str) -> None:
    """Assets or debts page: stats, monthly chart, table, forms."""
    is_debt = entity == "debts"
    stats = services.record_stats(entity).execute()
    currency_code = services.settings.default_currency
    columns = st.columns(4)
    columns[0].metric("Records", stats.count)
    columns[1].metric(
        "Outstanding" if is_debt else "Total value",
        format_currency(stats.total, currency_code),
    )
    if is_debt:
        columns[2].metric(
            "Total principal",
            format_currency(
                stats.total_principal or Decimal("0"),
                currency_code,
            ),
        )
    else:
        columns[2].metric("Asset types", stats.distinct_types)
    columns[3].metric(
        "Largest",
        format_currency(stats.highest, currency_code),
    )
    st.caption(
        f"Last updated: {format_time_ago(stats.last_modified)} "
        f"· {stats.count} {entity}"
    )

    records = services.access_for(entity).list_records()
    if records:
        st.altair_chart(
            build_monthly_chart(prepare_monthly_data(stats.monthly_totals)),
            use_container_width=True,
        )
        rows = _debt_rows(records) if is_debt else _asset_rows(records)
        st.dataframe(rows, use_container_width=True, hide_index=True)
    else:
        st.info(f"No {entity} yet. Add your first one below.")

    with st.expander(f"Add {'debt' if is_debt else 'asset'}"):
        _render_record_form(services, entity)
    if records:
        _render_edit_section(services, entity, records)


def _render_edit_section(
    services: TrackerServices,
    entity: str,
    records: Sequence[Any],
    family_member_id: str | None = None,
) -> None:
    by_id = {record.id: record for record in records}
    selected = st.selectbox(
        "Edit or delete",
        list(by_id),
        format_func=lambda record_id: _record_caption(by_id[record_id]),
        key=f"{entity}_{family_member_id}_picker",
    )
    if selected is None:
        return
    with st.expander("Edit selected"):
        _render_record_form(
            services,
            entity,
            by_id[selected],
            family_member_id=family_member_id,
        )
    if st.button("Delete selected", key=f"{entity}_{selected}_delete"):
        if _delete(services, entity, selected):
            st.rerun()


def _render_family(services: TrackerServices) -> None:
    overview = services.family_overview().execute()
    currency_code = overview.currency_code
    assets_col, debts_col, net_col = st.columns(3)
    assets_col.metric(
        "Family assets",
        format_currency(overview.total_assets, currency_code),
    )
    debts_col.metric(
        "Family debts",
        format_currency(overview.total_debts, currency_code),
    )
    net_col.metric(
        "Family net worth",
        format_currency(overview.net_worth, currency_code),
    )

    members = services.family_members.list_records()
    bar_data = prepare_member_bar_data(overview.member_metrics)
    if bar_data:
        st.altair_chart(
            build_bar_chart(
                bar_data,
                "member",
                "net_worth",
                "Net worth by member",
            ),
            use_container_width=True,
        )

    with st.expander("Add family member"):
        _render_record_form(services, "family_members")

    if not members:
        st.info("No family members yet.")
        return

    metrics_by_member = {
        item.entity.id: item for item in overview.member_metrics
    }
    by_id = {member.id: member for member in members}
    selected = st.selectbox(
        "Family member",
        list(by_id),
        format_func=lambda member_id: _record_caption(by_id[member_id]),
        key="family_member_picker",
    )
    if selected is None:
        return
    member = by_id[selected]
    st.subheader(member.name)
    metrics = metrics_by_member.get(member.id)
    if metrics is not None:
        st.caption(
            f"{metrics.asset_count} assets, {metrics.debt_count} "
            f"debts, net worth "
            f"{format_currency(metrics.net_worth, currency_code)}"
        )
    with st.expander("Edit member"):
        _render_record_form(services, "family_members", member)
    if st.button("Remove member", key=f"member_{member.id}_delete"):
        if _delete(services, "family_members", member.id):
            st.rerun()
    _render_member_records(services, member.id)


def _render_member_records(services: TrackerServices, member_id: str) -> None:
    for entity in ("family_assets", "family_debts"):
        records = services.access_for(entity).list_records(member_id)
        is_debt = entity == "family_debts"
        st.markdown(f"**{'Debts' if is_debt else 'Assets'}**")
        if records:
            rows = _debt_rows(records) if is_debt else _asset_rows(records)
            st.dataframe(rows, use_container_width=True, hide_index=True)
        with st.expander(f"Add {'debt' if is_debt else 'asset'}"):
            _render_record_form(services, entity, family_member_id=member_id)
        if records:
            _render_edit_section(
                services,
                entity,
                records,
                family_member_id=member_id,
            )


def _render_auth(services: TrackerServices) -> None:
    """Sign-in / sign-up screen."""
    st.subheader("Welcome")
    sign_in_tab, sign_up_tab = st.tabs(["Sign in", "Sign up"])
    for tab, action in ((sign_in_tab, "sign_in"), (sign_up_tab, "sign_up")):
        with tab:
            with st.form(f"{action}_form"):
                email = st.text_input("Email", key=f"{action}_email")
                password = st.text_input(
                    "Password",
                    type="password",
                    key=f"{action}_password",
                )
                submitted = st.form_submit_button(
                    "Sign in" if action == "sign_in" else "Create account"
                )
            if not submitted:
                continue
            try:
                getattr(services.auth, action)(email, password)
            except (AuthenticationError, RemoteOperationError) as exc:
                st.error(str(exc))
                continue
            st.rerun()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Family Finance Tracker", layout="wide")
    st.title("Family Finance Tracker")

    services = _get_services()
    user = services.session.user
    if user is None:
        _render_auth(services)
        return

    st.sidebar.caption(f"Signed in as {user.email}")
    page = st.sidebar.selectbox("Page", PAGES)
    if st.sidebar.button("Sign out"):
        services.auth.sign_out()
        st.rerun()

    if page == "Dashboard":
        _render_dashboard(services)
    elif page == "Assets":
        _render_records_page(services, "assets")
    elif page == "Debts":
        _render_records_page(services, "debts")
    else:
        _render_family(services)


if __name__ == "__main__":  # pragma: no cover
    main()
