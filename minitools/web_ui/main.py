"""NiceGUI entrypoint for the Mini Tools web runtime."""

from __future__ import annotations

import argparse
import logging
import os

from nicegui import app as nicegui_app
from nicegui import ui

from minitools.adapters.random_source import RandomSource
from minitools.adapters.storage_local import StorageLocal
from minitools.adapters.url_opener import SystemUrlOpener
from minitools.app.runtime import AppRuntime
from minitools.domain.errors import UseCaseError
from minitools.domain.pages import Page
from minitools.usecases.user_settings import LoadUserSettings
from minitools.utils import logging as logging_utils
from minitools.viewmodels.about_vm import AboutVM
from minitools.viewmodels.nav_vm import APP_TITLE, NavVM
from minitools.viewmodels.session_vm import GUESS_PLACEHOLDER, PASSWORD_PLACEHOLDER, SessionVM
from minitools.viewmodels.settings_vm import SettingsVM

PUMP_INTERVAL_S = 0.1

LOGGER = logging.getLogger(__name__)


def _load_settings() -> SettingsVM:
    settings_vm = SettingsVM()
    load = LoadUserSettings(StorageLocal(root_dir=os.environ.get("MINITOOLS_STORAGE_ROOT") or "."))
    try:
        payload = load()
        if payload is not None:
            settings_vm.apply_dict(payload)
    except (UseCaseError, ValueError) as exc:
        LOGGER.warning("Could not load settings: %s", exc)
    logging_utils.apply_gui_preferences(settings_vm.debug_logging)
    return settings_vm


def build_runtime(settings_vm: SettingsVM) -> AppRuntime:
    return AppRuntime(
        rng=RandomSource(),
        opener=SystemUrlOpener(),
        watch_interval_s=settings_vm.watch_interval_s,
    )


def _build_ui(runtime: AppRuntime, settings_vm: SettingsVM) -> None:
    """Register the NiceGUI page for the runtime."""

    @ui.page("/")
    def index() -> None:
        vm = SessionVM(runtime.submit)
        nav_vm = NavVM(active=settings_vm.start_page)
        about_vm = AboutVM()
        vm.apply_snapshot(runtime.snapshot())

        @ui.refreshable
        def render_watch() -> None:
            view = vm.view
            with ui.row().classes("items-center q-gutter-md"):
                ui.label(view.watch_label).classes("text-h6")
                ui.button(view.watch_button, on_click=vm.cmd_toggle_watch, color="primary")

        @ui.refreshable
        def render_counter() -> None:
            with ui.row().classes("items-center q-gutter-md"):
                ui.button("-", on_click=vm.cmd_decrement)
                ui.label(vm.view.counter_text).classes("text-h6")
                ui.button("+", on_click=vm.cmd_increment)

        @ui.refreshable
        def render_guess_feedback() -> None:
            ui.label(vm.view.feedback).classes("text-h6")
            ui.label(vm.view.attempts_label)

        with ui.header().classes("items-center justify-between"):
            title = ui.label(nav_vm.window_title()).classes("text-h6")
            ui.button("About", on_click=lambda: about.open()).props("flat color=white")

        with ui.dialog() as about, ui.card():
            ui.label(about_vm.heading()).classes("text-h6")
            ui.label(f"License: {about_vm.license}")
            for label, url in about_vm.links:
                ui.button(label, on_click=lambda _, u=url: vm.cmd_open_link(u)).props("flat")
            ui.button("Close", on_click=about.close)

        def on_tab_change(event) -> None:
            nav_vm.select(str(event.value))
            title.text = nav_vm.window_title()

        with ui.tabs(on_change=on_tab_change).classes("w-full") as tabs:
            tab_items = {
                item.page: ui.tab(item.page.value, label=item.label, icon=item.icon)
                for item in nav_vm.items
            }

        with ui.tab_panels(tabs, value=nav_vm.active.value).classes("w-full"):
            with ui.tab_panel(tab_items[Page.WATCH]):
                render_watch()
            with ui.tab_panel(tab_items[Page.COUNTER]):
                render_counter()
            with ui.tab_panel(tab_items[Page.PASSWORD]):
                with ui.row().classes("items-center q-gutter-md"):
                    password_input = ui.input(
                        placeholder=PASSWORD_PLACEHOLDER,
                        value=vm.view.password,
                        on_change=lambda e: vm.set_password_text(str(e.value or "")),
                    ).props("clearable")
                    ui.button("Generate password", on_click=vm.cmd_generate_password, color="primary")
            with ui.tab_panel(tab_items[Page.GUESS]):
                with ui.row().classes("items-center q-gutter-md"):
                    guess_input = ui.input(
                        placeholder=GUESS_PLACEHOLDER,
                        value=vm.view.guess_input,
                        on_change=lambda e: vm.set_guess_text(str(e.value or "")),
                    ).props("clearable")
                    guess_input.on("keydown.enter", lambda _: vm.cmd_check_guess())
                    ui.button("Check the number", on_click=vm.cmd_check_guess, color="primary")
                render_guess_feedback()
                ui.button("Start a new game", on_click=vm.cmd_new_game)

        def refresh() -> None:
            runtime.pump()
            previous = vm.view
            view = vm.apply_snapshot(runtime.snapshot())
            if view == previous:
                return
            if password_input.value != view.password:
                password_input.value = view.password
            if guess_input.value != view.guess_input:
                guess_input.value = view.guess_input
            render_watch.refresh()
            render_counter.refresh()
            render_guess_feedback.refresh()

        ui.timer(PUMP_INTERVAL_S, refresh)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the Mini Tools NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root()
    settings_vm = _load_settings()
    runtime = build_runtime(settings_vm)
    if args.smoke_test:
        runtime.pump()
        print("web-smoke-ok", runtime.snapshot().feedback)
        runtime.close()
        return
    nicegui_app.on_shutdown(runtime.close)
    _build_ui(runtime, settings_vm)
    ui.run(
        host=args.host,
        port=args.port,
        title=APP_TITLE,
        reload=args.reload,
        show=False,
    )


if __name__ == "__main__":
    main()
