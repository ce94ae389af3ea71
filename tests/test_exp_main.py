import pytest

import exp_main
from ga_config import GaInfo


@pytest.fixture
def small_info(monkeypatch):
    """Swap the default configuration for one that converges in a few generations."""
    monkeypatch.setattr(exp_main, 'GaInfo',
                        lambda: GaInfo(population_size=5, target='AB', mutation_chance=1.0,
                                       character_range=(65, 67)))


def test_main_reports_run(small_info, capsys):
    assert exp_main.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'Population Size: 5'
    assert lines[1] == 'Mutation Chance: 100%'
    assert lines[-2] == 'AB  |  1'
    assert lines[-1].startswith('Completed in ')
    assert lines[-1].endswith(' ms).')


def test_pause_waits_for_input(small_info, monkeypatch, capsys):
    calls = []
    monkeypatch.setattr('builtins.input', lambda *args: calls.append(args) or '')
    assert exp_main.main(['--pause']) == 0
    assert len(calls) == 1


def test_no_pause_by_default(small_info, monkeypatch):
    def fail(*args):
        raise AssertionError('input() should not be called')
    monkeypatch.setattr('builtins.input', fail)
    assert exp_main.main([]) == 0


def test_unknown_arguments_are_ignored(small_info, monkeypatch):
    calls = []
    monkeypatch.setattr('builtins.input', lambda *args: calls.append(args) or '')
    assert exp_main.main(['--verbose', 'extra', '--pause', '-x']) == 0
    assert len(calls) == 1
