"""CLI command for looking up a single word."""

from ydt.config import create_default_config
from ydt.exceptions import YdtError
from ydt.interfaces import PresenterProtocol, TranslationProvider
from ydt.presenters import ConsolePresenter
from ydt.services import TranslationService


def lookup_command(
    args,
    provider: TranslationProvider | None = None,
    presenter: PresenterProtocol | None = None,
) -> int:
    """Execute a word lookup.

    Args:
        args: Parsed command-line arguments
        provider: Translation source (defaults to the Youdao service)
        presenter: Output target (defaults to the console)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()
    provider = provider or TranslationService(create_default_config())

    try:
        text = provider.get_translation(args.word)
    except YdtError as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_result(text)
    return 0
