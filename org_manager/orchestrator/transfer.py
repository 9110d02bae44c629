"""
Transfer orchestration for apps, teams and organizations.

Validation failures and failed lookups raise; a failed transfer request is
printed and returned as a TransferResult so the remaining work can continue.
"""

from typing import Any, Dict, List, Optional

import httpx

from ..client.api import PlatformClient
from ..core.exceptions import AccessError, ApiError, ConfigurationError, MigrationError
from ..models.results import MigrationReport, TransferDirection, TransferResult
from ..utils.logging import get_logger
from ..utils.output import ProgressOutput

logger = get_logger("orchestrator")

USAGE = "Usage: heroku manager:transfer (--to|--from) ORG_NAME [--app APP_NAME]"

NO_ORGANIZATION = (
    "No organization specified.\n"
    "Specify which organization to transfer to or from with --to <org name> or --from <org name>"
)
AMBIGUOUS_ORGANIZATION = (
    "Ambiguous option. Please specify either a --to <org name> or a --from <org name>. Not both."
)


def validate_transfer_flags(to: Optional[str], from_: Optional[str]) -> None:
    """Require exactly one of to/from."""
    if not to and not from_:
        raise ConfigurationError(NO_ORGANIZATION)
    if to and from_:
        raise ConfigurationError(AMBIGUOUS_ORGANIZATION)


def validate_migrate_flags(team: Optional[str], to: Optional[str], from_: Optional[str]) -> None:
    """Require a team and a destination organization."""
    if not to and not from_:
        raise ConfigurationError(NO_ORGANIZATION)
    if not team:
        raise ConfigurationError(
            "No team specified.\n"
            "Specify which team to transfer applications to/from with --team <team name>"
        )
    if not to:
        raise ConfigurationError(
            "Migrating apps from an organization to a team is not supported.\n"
            "Specify the organization to migrate the team into with --to <org name>"
        )


def _json_object(response: httpx.Response, what: str) -> Dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        raise ApiError(
            f"Unexpected response body while looking up {what}",
            status_code=response.status_code,
            body=response.text,
        )
    return payload


def _ensure_lookup_ok(response: httpx.Response, what: str) -> None:
    if response.is_success:
        return
    raise ApiError(
        f"Unexpected response while looking up {what}: {response.status_code}",
        status_code=response.status_code,
        body=response.text,
    )


class TransferOrchestrator:
    """Runs the transfer, migrate and orgs operations against a PlatformClient."""

    def __init__(self, client: PlatformClient, output: Optional[ProgressOutput] = None):
        self.client = client
        self.output = output or ProgressOutput()

    def transfer(
        self,
        app: Optional[str],
        to: Optional[str] = None,
        from_: Optional[str] = None
    ) -> TransferResult:
        """
        Transfer an app to or from an organization account.

        Args:
            app: Application name
            to: Organization to move the app into from the personal account
            from_: Organization to move the app out of, to the personal account

        Returns:
            The outcome of the transfer request

        Raises:
            ConfigurationError: if neither or both of to/from are given, or no app
            AccessError: if the caller cannot see the app
        """
        validate_transfer_flags(to, from_)
        if not app:
            raise ConfigurationError(
                "No app specified.\nRun this command from an app folder or specify which app to use with --app APP."
            )

        self._verify_app_access(app)

        if to:
            self.output.write(f"Transferring {app} to {to}...")
            return self._report_transfer(self._send_transfer(app, to, TransferDirection.TO_ORGANIZATION))

        self.output.write(f"Transferring {app} from {from_} to your personal account...")
        return self._report_transfer(self._send_transfer(app, from_, TransferDirection.FROM_ORGANIZATION))

    def migrate(
        self,
        team: Optional[str],
        to: Optional[str] = None,
        from_: Optional[str] = None
    ) -> MigrationReport:
        """
        Move every app of a team into an organization.

        Apps are first claimed to the personal account in one request, then
        transferred to the organization one by one.

        Raises:
            ConfigurationError: if the organization or team is missing
            AccessError: if the team does not exist for the caller
            MigrationError: if claiming the apps to the personal account fails
        """
        validate_migrate_flags(team, to, from_)
        if from_:
            logger.warning(f"Ignoring --from {from_}; apps are migrated to {to}")

        apps = self._team_apps(team)
        report = MigrationReport(team=team, organization=to, apps=apps)

        if not apps:
            self.output.line(f"Team {team} has no apps to migrate.")
            return report

        self.output.line(f"Migrating the following apps from team {team}:")
        for app in apps:
            self.output.line(f"    {app}")

        self.output.write("Transferring apps to your personal account...")
        response = self.client.claim_team_apps(apps)
        if response.status_code != 200:
            self.output.write(" failed!\n")
            raise MigrationError(
                "Migration failed while transferring apps to your personal account.\n"
                f"Check the {team} team and your personal account to find the apps.\n"
                "No apps were transferred to the organization.",
                details={"team": team, "status_code": response.status_code},
            )
        self.output.write(" done\n")

        self.output.write(f"Transferring apps from your personal account to the {to} organization...\n")
        for app in apps:
            self.output.write(f"    {app}...")
            result = self._send_transfer(app, to, TransferDirection.TO_ORGANIZATION)
            self.output.write(" transferred\n" if result.succeeded else " failed!\n")
            report.results.append(result)

        if report.failed:
            logger.warning(f"{len(report.failed)} of {len(apps)} apps were not transferred to {to}")
        return report

    def orgs(self) -> List[str]:
        """Print and return the organizations the caller belongs to."""
        response = self.client.get_user_info()
        _ensure_lookup_ok(response, "your organizations")

        names = [
            org.get("organization_name", "")
            for org in _json_object(response, "your organizations").get("organizations") or []
            if isinstance(org, dict)
        ]
        self.output.line("You are a member of the following organizations:")
        for name in names:
            self.output.line(f"    {name}")
        return names

    def _verify_app_access(self, app: str) -> None:
        response = self.client.get_app(app)
        if response.status_code == 404:
            raise AccessError(f"You do not have access to the app '{app}'", details={"app": app})
        _ensure_lookup_ok(response, f"app '{app}'")

    def _team_apps(self, team: str) -> List[str]:
        response = self.client.get_team(team)
        if response.status_code == 404:
            raise AccessError(
                f"No such team: '{team}' (perhaps you don't have access?)",
                details={"team": team},
            )
        _ensure_lookup_ok(response, f"team '{team}'")
        apps = _json_object(response, f"team '{team}'").get("apps") or []
        if not isinstance(apps, list):
            raise ApiError(
                f"Unexpected app list for team '{team}'",
                status_code=response.status_code,
                body=response.text,
            )
        return [str(app) for app in apps]

    def _send_transfer(
        self,
        app: str,
        organization: str,
        direction: TransferDirection
    ) -> TransferResult:
        """Send one transfer request; a transport failure becomes a failed result."""
        if direction == TransferDirection.TO_ORGANIZATION:
            send, expected = self.client.create_transfer, 201
        else:
            send, expected = self.client.transfer_out, 200

        try:
            response = send(organization, app)
        except ApiError as e:
            logger.debug(f"Transfer of {app} failed before a response: {e.message}")
            return TransferResult(
                app=app,
                organization=organization,
                direction=direction,
                status_code=None,
                body=e.message,
                succeeded=False,
            )

        return TransferResult(
            app=app,
            organization=organization,
            direction=direction,
            status_code=response.status_code,
            body=response.text,
            succeeded=response.status_code == expected,
        )

    def _report_transfer(self, result: TransferResult) -> TransferResult:
        if result.succeeded:
            self.output.write(" done\n")
        elif result.status_code is None:
            self.output.write(f"failed\nAn error occurred: {result.body}\n")
        else:
            self.output.write(f"failed\nAn error occurred: {result.status_code}\n{result.body}\n")
        return result
