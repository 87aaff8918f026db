from pathlib import Path

import pytest

from refmodel.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_8_dangling_reference(capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(EXAMPLES / 'program_8.rs')])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.strip() == 'Runtime error: NotFound: cannot find place: a'
