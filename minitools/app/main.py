# minitools/app/main.py
from __future__ import annotations
import logging
import os
from typing import Dict, Optional

# ---- Views (UI-only) ----
from .views.about_dialog import AboutDialog
from .views.main_window import MainWindowView
from .views.tool_pages import CounterPageView, GuessPageView, PasswordPageView, WatchPageView

# ---- ViewModels ----
from ..viewmodels.about_vm import AboutVM
from ..viewmodels.nav_vm import NavVM
from ..viewmodels.session_vm import SessionView, SessionVM
from ..viewmodels.settings_vm import SettingsVM

# ---- Runtime & Adapters ----
from ..adapters.random_source import RandomSource
from ..adapters.storage_local import StorageLocal
from ..adapters.url_opener import SystemUrlOpener
from ..domain.errors import UseCaseError
from ..domain.pages import PAGE_ORDER, Page
from ..usecases.user_settings import LoadUserSettings, SaveUserSettings
from ..utils import logging as logging_utils
from .runtime import AppRuntime

PUMP_INTERVAL_MS = 50


class App:
    """Bootstrap: wire Views <-> ViewModels, the runtime and the pump timer."""

    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self._status_on_start: Optional[str] = None

        # ---- Settings (persisted) ----
        storage = StorageLocal(root_dir=os.environ.get("MINITOOLS_STORAGE_ROOT") or ".")
        self._load_settings = LoadUserSettings(storage)
        self._store_settings = SaveUserSettings(storage)
        self.settings_vm = SettingsVM(on_save=self._save_user_settings)
        self._load_user_settings()

        # ---- Runtime ----
        self.runtime = AppRuntime(
            rng=RandomSource(),
            opener=SystemUrlOpener(),
            watch_interval_s=self.settings_vm.watch_interval_s,
        )

        # ---- ViewModels ----
        self.nav_vm = NavVM(active=self.settings_vm.start_page, on_page_changed=self._on_page_changed)
        self.session_vm = SessionVM(self.runtime.submit, on_view_changed=self._render)
        self.about_vm = AboutVM()
        self.runtime.add_listener(self.session_vm.apply_snapshot)

        # ---- Main window ----
        self.win = MainWindowView(
            pages=[(item.page.value, item.label) for item in self.nav_vm.items],
            on_open_about=self._on_open_about,
            on_page_selected=self.nav_vm.select_index,
            on_close=self._on_close,
        )
        self._about: Optional[AboutDialog] = None

        # ---- Page views (constructor callbacks) ----
        vm = self.session_vm
        hosts = self.win.page_hosts
        self.pages: Dict[Page, object] = {
            Page.WATCH: WatchPageView(hosts[Page.WATCH.value], on_toggle=vm.cmd_toggle_watch),
            Page.COUNTER: CounterPageView(
                hosts[Page.COUNTER.value],
                on_increment=vm.cmd_increment,
                on_decrement=vm.cmd_decrement,
            ),
            Page.PASSWORD: PasswordPageView(
                hosts[Page.PASSWORD.value],
                on_input=vm.set_password_text,
                on_clear=vm.cmd_clear_password,
                on_generate=vm.cmd_generate_password,
            ),
            Page.GUESS: GuessPageView(
                hosts[Page.GUESS.value],
                on_input=vm.set_guess_text,
                on_clear=vm.cmd_clear_guess,
                on_check=vm.cmd_check_guess,
                on_new_game=vm.cmd_new_game,
            ),
        }
        for page, view in self.pages.items():
            self.win.mount_page(page.value, view)  # type: ignore[arg-type]

        # ---- Initial UI state ----
        self.win.select_page(PAGE_ORDER.index(self.nav_vm.active))
        self.win.set_window_title(self.nav_vm.window_title())
        self.session_vm.apply_snapshot(self.runtime.snapshot())
        self.win.show_toast(self._status_on_start or "Ready.")
        self._schedule_pump()

    # ==================================================================
    # Settings
    # ==================================================================
    def _load_user_settings(self) -> None:
        try:
            payload = self._load_settings()
            if payload is not None:
                self.settings_vm.apply_dict(payload)
        except (UseCaseError, ValueError) as exc:
            self._log.warning("Could not load settings: %s", exc)
            self._status_on_start = f"Could not load settings: {exc}"
        self._apply_logging_preferences()

    def _apply_logging_preferences(self) -> None:
        level = logging_utils.apply_gui_preferences(self.settings_vm.debug_logging)
        self._log.debug("Effective GUI log level: %s", logging_utils.level_name(level))

    def _save_user_settings(self, payload: dict) -> None:
        try:
            self._store_settings(payload)
        except UseCaseError as exc:
            self._log.warning("Could not save settings: %s", exc)

    # ==================================================================
    # Pump loop
    # ==================================================================
    def _schedule_pump(self) -> None:
        self.win.after(PUMP_INTERVAL_MS, self._on_pump_tick)

    def _on_pump_tick(self) -> None:
        """Cooperative pump executed on the Tkinter thread."""
        try:
            self.runtime.pump()
        finally:
            self._schedule_pump()

    # ==================================================================
    # VM ↔ View glue
    # ==================================================================
    def _render(self, view: SessionView) -> None:
        for page_view in self.pages.values():
            page_view.render(view)  # type: ignore[attr-defined]

    def _on_page_changed(self, page: Page) -> None:
        self.win.set_window_title(self.nav_vm.window_title())
        self._log.debug("Active page: %s", page.value)

    def _on_open_about(self) -> None:
        if self._about is not None:
            self._about.lift()
            return
        self._about = AboutDialog(
            self.win,
            heading=self.about_vm.heading(),
            license_text=self.about_vm.license,
            links=self.about_vm.links,
            on_open_link=self.session_vm.cmd_open_link,
            on_close=self._on_about_closed,
        )

    def _on_about_closed(self) -> None:
        self._about = None

    def _on_close(self) -> None:
        self.runtime.close()
        self.settings_vm.start_page = self.nav_vm.active
        self.settings_vm.cmd_save()


def main() -> None:
    logging_utils.configure_root()
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
