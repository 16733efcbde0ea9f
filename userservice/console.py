"""
Interactive text menu driving UserService.

Reads one answer per line from ``stdin`` and writes prompts/results to
``stdout`` so the loop can be scripted in tests with StringIO.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from userservice.core.logging import get_logger
from userservice.domain.errors import (
    EmailAlreadyExistsError,
    StorageError,
    UserNotFoundError,
    ValidationError,
)
from userservice.services.user_service import UserService

logger = get_logger(__name__)

MENU = (
    "\n=== User Management System ===",
    "1. Create User",
    "2. Find User by ID",
    "3. Find All Users",
    "4. Update User",
    "5. Delete User",
    "6. Find User by Email",
    "0. Exit",
)


class UserConsoleApp:
    def __init__(self, service: UserService, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.service = service
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.running = True

    # -------------------------------------- io helpers --------------------------------------
    def _print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            # EOF ends the session instead of spinning on empty input
            self.running = False
            raise EOFError
        return line.rstrip("\r\n")

    def _ask_id(self, prompt: str) -> int:
        raw = self._ask(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            raise ValidationError("Invalid user ID") from None

    def _ask_age(self, prompt: str) -> Optional[int]:
        raw = self._ask(prompt).strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            raise ValidationError("Age must be a whole number") from None

    # -------------------------------------- loop --------------------------------------
    def run(self) -> None:
        logger.info("Starting user console")
        while self.running:
            self.print_menu()
            try:
                choice = self._ask("Choose an option: ").strip()
                self.process_choice(choice)
            except EOFError:
                break
            except (UserNotFoundError, EmailAlreadyExistsError) as exc:
                self._print(f"Error: {exc.message}")
            except ValidationError as exc:
                self._print(f"Validation error: {exc.message}")
            except StorageError as exc:
                logger.error("Storage failure: %s", exc.message)
                self._print(f"Unexpected error: {exc.message}")
            except Exception as exc:
                logger.exception("Unexpected error")
                self._print(f"Unexpected error: {exc}")
            if self.running:
                try:
                    self._ask("\nPress Enter to continue...")
                except EOFError:
                    break
        logger.info("User console stopped")

    def stop(self) -> None:
        self.running = False

    def print_menu(self) -> None:
        for line in MENU:
            self._print(line)

    def process_choice(self, choice: str) -> None:
        actions = {
            "1": self.create_user,
            "2": self.get_user_by_id,
            "3": self.get_all_users,
            "4": self.update_user,
            "5": self.delete_user,
            "6": self.get_user_by_email,
        }
        if choice == "0":
            self.running = False
            self._print("Application closed!")
            return
        action = actions.get(choice)
        if action is None:
            self._print("Invalid choice. Please try again.")
            return
        action()

    # -------------------------------------- actions --------------------------------------
    def create_user(self) -> None:
        self._print("\n--- Create New User ---")
        name = self._ask("Enter user name: ")
        email = self._ask("Enter user email: ")
        age = self._ask_age("Enter age (optional, press Enter to skip): ")
        user = self.service.create_user(name, email, age)
        self._print("User created successfully!")
        self._print(f"Created: {user!r}")

    def get_user_by_id(self) -> None:
        self._print("\n--- Find User by ID ---")
        user_id = self._ask_id("Enter user ID: ")
        user = self.service.get_user_by_id(user_id)
        self._print("User found:")
        self._print(repr(user))

    def get_all_users(self) -> None:
        self._print("\n--- All Users ---")
        users = self.service.get_all_users()
        if not users:
            self._print("No users found.")
            return
        self._print(f"Total users: {len(users)}")
        for idx, user in enumerate(users, start=1):
            self._print(f"{idx}. {user!r}")

    def update_user(self) -> None:
        self._print("\n--- Update User ---")
        user_id = self._ask_id("Enter user ID to update: ")
        current = self.service.get_user_by_id(user_id)
        self._print(f"Current user data: {current!r}")
        name = self._ask("Enter new name: ")
        email = self._ask("Enter new email: ")
        age = self._ask_age("Enter new age (optional, press Enter to skip): ")
        user = self.service.update_user(user_id, name, email, age)
        self._print("User updated successfully!")
        self._print(f"Updated: {user!r}")

    def delete_user(self) -> None:
        self._print("\n--- Delete User ---")
        user_id = self._ask_id("Enter user ID to delete: ")
        user = self.service.get_user_by_id(user_id)
        self._print(f"User to delete: {user!r}")
        confirmation = self._ask("Are you sure? (yes/no): ").strip()
        if confirmation.lower() == "yes":
            self.service.delete_user(user_id)
            self._print("User deleted successfully!")
        else:
            self._print("Deletion cancelled.")

    def get_user_by_email(self) -> None:
        self._print("\n--- Find User by Email ---")
        email = self._ask("Enter email: ")
        user = self.service.get_user_by_email(email)
        self._print("User found:")
        self._print(repr(user))
