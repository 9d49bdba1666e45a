import argparse

from pydantic import ValidationError
from pydantic_settings import CliApp, CliSettingsSource

from saudi_id.config import SaudiIdSettings
from saudi_id.id import InvalidIdError


class PydanticArguments(SaudiIdSettings, cli_parse_args=True, cli_kebab_case=True):
    """
    Command line arguments declared as a pydantic model. Subclasses implement `cli_cmd`.

    Bad arguments are reported the same way argparse reports its own and exit with 2. An `InvalidIdError` from the
    command is the user's input being wrong rather than a crash, so it is printed and `run` returns 1.
    """

    @classmethod
    def run(cls) -> int:
        css: CliSettingsSource[argparse.ArgumentParser] = CliSettingsSource(cls)
        try:
            CliApp.run(cls, cli_settings_source=css)
        except ValidationError as e:
            msg = ""
            for err in e.errors():
                msg += f"\nargument {err['loc'][0]}: {err['msg']}"
            css.root_parser.error(msg)
        except InvalidIdError as e:
            print(f"Invalid ID ({e.reason})")
            return 1
        return 0
