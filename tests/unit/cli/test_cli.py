"""CLI argument and default-path behavior tests.

Verifies how ``lazyfm.cli.main`` chooses the starting directory and options.
"""

from __future__ import annotations

import io
import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazyfm import cli


class CliDefaultPathTests(unittest.TestCase):
    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                with mock.patch.object(sys, "argv", ["lazyfm"]), mock.patch("lazyfm.cli.run_browser") as run_browser:
                    cli.main()
            finally:
                os.chdir(previous_cwd)

            run_browser.assert_called_once_with(str(root), show_hidden=None, theme_name=None, no_color=False)

    def test_main_uses_explicit_path_argument_over_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "target"
            target.mkdir()

            with mock.patch.object(sys, "argv", ["lazyfm", str(target), "--show-hidden", "--no-color"]), mock.patch(
                "lazyfm.cli.run_browser"
            ) as run_browser:
                cli.main(default_path=root / "unused")

            run_browser.assert_called_once_with(str(target), show_hidden=True, theme_name=None, no_color=True)

    def test_missing_path_exits_with_message(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with mock.patch.object(sys, "argv", ["lazyfm", str(missing)]), mock.patch(
                "lazyfm.cli.run_browser"
            ) as run_browser:
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

            self.assertEqual(str(ctx.exception), f"Path not found: {missing}")
            run_browser.assert_not_called()

    def test_file_path_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with mock.patch.object(sys, "argv", ["lazyfm", str(target)]), mock.patch("lazyfm.cli.run_browser"):
                with self.assertRaises(SystemExit) as ctx:
                    cli.main()

            self.assertEqual(str(ctx.exception), f"Not a directory: {target}")

    def test_theme_option_is_persisted_and_forwarded(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(sys, "argv", ["lazyfm", tmp, "--theme", "ocean"]), mock.patch(
                "lazyfm.cli.run_browser"
            ) as run_browser, mock.patch("lazyfm.cli.save_theme_name") as save_theme:
                cli.main()

            save_theme.assert_called_once_with("ocean")
            self.assertEqual(run_browser.call_args.kwargs["theme_name"], "ocean")


class CliLastDirectoryTests(unittest.TestCase):
    def test_print_last_dir_writes_saved_directory(self) -> None:
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["lazyfm", "--print-last-dir"]), mock.patch(
            "lazyfm.cli.load_last_directory", return_value="/srv/data"
        ), mock.patch("sys.stdout", stdout), mock.patch("lazyfm.cli.run_browser") as run_browser:
            cli.main()

        self.assertEqual(stdout.getvalue(), "/srv/data\n")
        run_browser.assert_not_called()

    def test_print_last_dir_without_record_exits_nonzero(self) -> None:
        with mock.patch.object(sys, "argv", ["lazyfm", "--print-last-dir"]), mock.patch(
            "lazyfm.cli.load_last_directory", return_value=None
        ):
            with self.assertRaises(SystemExit) as ctx:
                cli.main()
        self.assertEqual(ctx.exception.code, 1)


class CliLoggingTests(unittest.TestCase):
    def test_log_file_attaches_handler_to_package_logger(self) -> None:
        package_logger = logging.getLogger("lazyfm")
        before = list(package_logger.handlers)
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "lazyfm.log"
            try:
                cli.configure_logging(str(log_path))
                logging.getLogger("lazyfm.modes.actions").debug("delete failed")
                added = [handler for handler in package_logger.handlers if handler not in before]
                self.assertEqual(len(added), 1)
                added[0].flush()
                self.assertIn("delete failed", log_path.read_text(encoding="utf-8"))
            finally:
                for handler in list(package_logger.handlers):
                    if handler not in before:
                        package_logger.removeHandler(handler)
                        handler.close()
                package_logger.setLevel(logging.NOTSET)

    def test_no_log_file_leaves_logger_untouched(self) -> None:
        package_logger = logging.getLogger("lazyfm")
        before = list(package_logger.handlers)
        cli.configure_logging(None)
        self.assertEqual(package_logger.handlers, before)


if __name__ == "__main__":
    unittest.main()
