"""NiceGUI entrypoint for the company directory."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from nicegui import ui

from aidex.app.settings import DirectorySettings, build_directory_port
from aidex.domain.ports import DirectoryPort, UseCaseError
from aidex.usecases.load_companies import LoadCompanies
from aidex.utils.logging import configure_root
from aidex.viewmodels.company_detail_vm import CompanyDetailVM
from aidex.viewmodels.company_list_vm import CompanyListVM

LOGGER = logging.getLogger(__name__)

BADGE_CLASSES = {
    "Inference": "bg-blue-100 text-blue-800",
    "GPUs": "bg-green-100 text-green-800",
    "Web3": "bg-purple-100 text-purple-800",
    "Fine-tuning": "bg-amber-100 text-amber-800",
}
FILTER_COLORS = {
    "all": "primary",
    "inference": "blue",
    "gpus": "green",
    "web3": "purple",
    "finetuning": "amber",
}


def _install_theme() -> None:
    """Install global CSS tokens for the directory pages."""
    ui.add_head_html(
        """
<style>
:root {
  --aidex-card: #ffffff;
  --aidex-border: #e5e7eb;
  --aidex-muted: #6b7280;
  --aidex-danger: #ef4444;
}
.aidex-page { max-width: 1200px; margin: 0 auto; padding: 16px; }
.aidex-muted { color: var(--aidex-muted); }
.aidex-error { color: var(--aidex-danger); }
.aidex-badge { border-radius: 9999px; padding: 2px 10px; font-size: 12px; font-weight: 500; }
.aidex-card { background: var(--aidex-card); border: 1px solid var(--aidex-border); border-radius: 10px; }
</style>
        """
    )


def _render_badges(labels: List[str]) -> None:
    with ui.row().classes("gap-2"):
        for label in labels:
            ui.label(label).classes(f"aidex-badge {BADGE_CLASSES.get(label, '')}")


def _build_ui(directory: DirectoryPort) -> None:
    """Register the NiceGUI pages."""

    @ui.page("/")
    async def index() -> None:
        vm = CompanyListVM(directory)

        @ui.refreshable
        def render_list() -> None:
            if vm.error:
                ui.label(vm.error).classes("w-full text-center aidex-error q-py-lg")
                return
            if not vm.state.settled:
                ui.label("Loading companies...").classes("w-full text-center q-py-lg")
                return

            with ui.row().classes("w-full justify-center gap-2"):
                for option in vm.filter_options():
                    button = ui.button(
                        option.label,
                        color=FILTER_COLORS.get(option.value, "primary"),
                        on_click=lambda _, value=option.value: vm.set_filter(value),
                    )
                    if not option.active:
                        button.props("outline")
            ui.label(vm.summary_text).classes("w-full text-center text-sm aidex-muted")

            if vm.no_matches:
                ui.label("No companies match the selected filter").classes(
                    "w-full text-center q-py-lg"
                )
                return
            with ui.grid(columns=3).classes("w-full gap-6"):
                for card in vm.cards():
                    with ui.link(target=card.href).classes("no-underline text-inherit"):
                        with ui.card().classes("aidex-card h-full cursor-pointer"):
                            ui.label(card.name).classes("text-h6")
                            ui.label(card.hero_tagline).classes("text-subtitle1")
                            ui.label(card.sub_tagline).classes("text-sm aidex-muted")
                            _render_badges(list(card.badges))

        with ui.column().classes("aidex-page w-full"):
            ui.label("AI Company Directory").classes("text-h4 w-full text-center")
            render_list()
        vm.on_changed = render_list.refresh
        ui.context.client.on_disconnect(vm.dispose)
        ui.timer(0.0, vm.load, once=True)

    @ui.page("/company/{company_id}")
    async def company_page(company_id: str) -> None:
        vm = CompanyDetailVM(directory)

        @ui.refreshable
        def render_detail() -> None:
            if vm.error or (vm.state.settled and vm.data is None):
                with ui.column().classes("w-full items-center q-py-xl"):
                    ui.label(vm.error or "Company not found").classes("text-h6 aidex-error")
                    ui.link("← Back to companies", "/")
                return
            data = vm.data
            if data is None:
                ui.label("Loading company details...").classes("w-full text-center text-h6 q-py-xl")
                return

            company = data.company
            ui.link("← Back to companies", "/").classes("q-mb-md")
            with ui.card().classes("aidex-card w-full q-pa-lg"):
                ui.label(company.name).classes("text-h4")
                if company.hero_tagline:
                    ui.label(company.hero_tagline).classes("text-h6")
                if company.sub_tagline:
                    ui.label(company.sub_tagline).classes("aidex-muted")
                _render_badges(list(company.capabilities()))
                for field in vm.overview_fields():
                    ui.label(field.title).classes("text-subtitle1 text-weight-bold q-mt-md")
                    if field.link:
                        ui.link(field.text, field.text, new_tab=True)
                    elif field.items:
                        with ui.column().classes("gap-0"):
                            for item in field.items:
                                ui.label(f"• {item}")
                    else:
                        ui.label(field.text)

            for section in vm.sections():
                with ui.card().classes("aidex-card w-full q-pa-lg q-mt-md"):
                    ui.label(section.title).classes("text-h6")
                    if section.key == "products":
                        for product in data.products:
                            ui.label(product.name).classes("text-subtitle1 text-weight-medium")
                            if product.description:
                                ui.label(product.description).classes("aidex-muted")
                    elif section.key == "pricing_models":
                        ui.table(
                            columns=[
                                {"name": "name", "label": "Plan", "field": "name", "align": "left"},
                                {"name": "price", "label": "Price", "field": "price", "align": "left"},
                                {"name": "details", "label": "Details", "field": "details", "align": "left"},
                            ],
                            rows=[asdict(row) for row in vm.pricing_rows()],
                        ).classes("w-full")
                    elif section.key == "customers":
                        with ui.row().classes("gap-2"):
                            for name in vm.customer_names():
                                ui.label(name).classes("aidex-badge bg-grey-2")

        async def start() -> None:
            await vm.load(company_id)

        with ui.column().classes("aidex-page w-full"):
            render_detail()
        vm.on_changed = render_detail.refresh
        ui.context.client.on_disconnect(vm.dispose)
        ui.timer(0.0, start, once=True)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the AI company directory web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--offline", action="store_true", help="serve the bundled JSON fixture")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args(argv)


def smoke_test(directory: DirectoryPort) -> int:
    """Load the listing once and report; returns a process exit code."""
    try:
        companies = LoadCompanies(directory)()
    except UseCaseError as exc:
        print(f"smoke-failed {exc.code}: {exc.message}", file=sys.stderr)
        return 1
    print("smoke-ok", len(companies), "companies")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args(argv)
    configure_root()
    settings = DirectorySettings.from_env()
    try:
        directory = build_directory_port(settings, offline=args.offline)
    except UseCaseError as exc:
        LOGGER.error("%s", exc.message)
        return 2
    if args.smoke_test:
        return smoke_test(directory)
    _install_theme()
    _build_ui(directory)
    ui.run(
        host=args.host,
        port=args.port,
        title="AI Company Directory",
        reload=args.reload,
        show=False,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
