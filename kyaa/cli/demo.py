"""kyaa-demo: registers three flags (plus any configured ones) and echoes its positionals."""

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from kyaa.config import KyaaConfig, build_registry, load_config_from_env
from kyaa.errors import FlagRegistryError, KyaaConfigError
from kyaa.logging import configure_logging, get_logger
from kyaa.models import ExitStatuses, FlagDescriptor, FlagMatch, FlagRegistry, OutputSinks, Positional
from kyaa.parsing import Handlers, run

logger = get_logger(__name__)

DEMO_REGISTRY = FlagRegistry.of(
    FlagDescriptor(
        short_char='x',
        long_name='enable-feature',
        help_text='        enable some feature',
    ),
    FlagDescriptor(
        short_char='l',
        long_name='log-file',
        arity='string',
        help_text='        use a given filename for the log file',
    ),
    FlagDescriptor(
        short_char='v',
        long_name='var',
        arity='integer',
        help_text='        set an integer variable\n        default: 0',
    ),
)


@dataclass
class DemoState:
    """Values the demo flags write to.

    Flags declared in the configuration file land in ``extras``, keyed by
    long name: ``True`` for flags without a value, the value otherwise.
    """

    use_feature: bool = False
    log_file: str = 'log.txt'
    var: int = 0
    read_stdin: bool = False
    extras: dict[str, str | int | bool] = field(default_factory=dict)


def extend_registry(config: KyaaConfig) -> FlagRegistry:
    """Append the configured flags after the three demo flags."""
    try:
        return FlagRegistry.of(*DEMO_REGISTRY.flags, *build_registry(config).flags)
    except FlagRegistryError as exc:
        raise KyaaConfigError(str(exc)) from exc


def build_handlers(
    state: DemoState,
    sinks: OutputSinks,
    registry: FlagRegistry = DEMO_REGISTRY,
) -> Handlers:
    """Wire the demo flags and positional echo to a state object."""

    def enable_feature(_match: FlagMatch) -> None:
        state.use_feature = True

    def log_file(match: FlagMatch) -> None:
        state.log_file = match.text

    def var(match: FlagMatch) -> None:
        state.var = match.number

    def record_extra(match: FlagMatch) -> None:
        state.extras[match.flag.long_name] = True if match.value is None else match.value

    def echo(positional: Positional) -> None:
        state.read_stdin = positional.read_stdin
        sinks.write_out(f'{positional.token}\n')

    flags = {flag.long_name: record_extra for flag in registry.flags}
    flags.update(
        {
            'enable-feature': enable_feature,
            'log-file': log_file,
            'var': var,
        },
    )
    return Handlers(flags=flags, positional=echo)


def run_demo(
    argv: Sequence[str | None] | None,
    *,
    count: int | None = None,
    state: DemoState | None = None,
    sinks: OutputSinks | None = None,
    statuses: ExitStatuses | None = None,
    registry: FlagRegistry = DEMO_REGISTRY,
) -> int:
    """Run the demo flags over a full argument vector (program name first).

    ``count`` defaults to ``len(argv)``; passing it explicitly lets callers
    exercise the parser's guards against inaccurate counts.
    """
    state = state if state is not None else DemoState()
    sinks = sinks or OutputSinks()
    if count is None:
        count = len(argv) if argv is not None else 0

    return run(
        count,
        argv,
        registry,
        build_handlers(state, sinks, registry),
        sinks=sinks,
        statuses=statuses,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the kyaa-demo CLI."""
    argv = sys.argv if argv is None else argv

    try:
        config = load_config_from_env()
        registry = extend_registry(config)
    except KyaaConfigError as e:
        sys.stderr.write(f'Error: {e}\n')
        return ExitStatuses().fail

    configure_logging(verbose=config.verbose)
    logger.debug('starting_demo', argv=list(argv), _verbose_statuses=config.statuses.model_dump())

    status = run_demo(argv, statuses=config.statuses, registry=registry)
    logger.debug('demo_finished', status=status)
    return status


if __name__ == '__main__':
    sys.exit(main())
