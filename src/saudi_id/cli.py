"Command line front end: `saudi-id check ID` and `saudi-id generate`"

import logging
import sys

from pydantic import BaseModel, Field
from pydantic_settings import CliApp, CliPositionalArg, CliSubCommand

from saudi_id.argparse import PydanticArguments
from saudi_id.id import Id, IdType, ParseError
from saudi_id.logging import LogLevel, setup_logging
from saudi_id.sentry import init as setup_sentry

logger = logging.getLogger(__name__)


class CheckCommand(BaseModel):
    """
    Check a national ID and print who it belongs to
    """

    national_id: CliPositionalArg[str] = Field(description="The 10 digit ID to check")

    def cli_cmd(self) -> None:
        national_id = Id.from_str(self.national_id)
        print(f"Valid {national_id.get_type().name.title()} ID")


class GenerateCommand(BaseModel):
    """
    Print random valid national IDs, one per line
    """

    type: IdType = Field(default=IdType.CITIZEN, description="Citizen or resident")
    count: int = Field(default=1, ge=1, description="How many IDs to generate")

    def cli_cmd(self) -> None:
        logger.info("Generating %d %s IDs", self.count, self.type)
        for _ in range(self.count):
            print(Id.new(self.type))


class SaudiIdCli(PydanticArguments, cli_prog_name="saudi-id"):
    """
    Validate or generate Saudi Arabian national ID numbers
    """

    log_level: LogLevel | None = Field(default=None, description="Console log level, defaults to WARNING")
    check: CliSubCommand[CheckCommand]
    generate: CliSubCommand[GenerateCommand]

    def cli_cmd(self) -> None:
        setup_logging(self.log_level)
        CliApp.run_subcommand(self)


def setup() -> None:
    setup_sentry(ignore_exceptions=[ParseError])


def main() -> None:
    """
    Entry point for the `saudi-id` script. Exits with 1 if the ID being checked is invalid.
    """
    setup()
    sys.exit(SaudiIdCli.run())
