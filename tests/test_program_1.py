from pathlib import Path

from refmodel.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_reference_then_deref(capsys):
    main([str(EXAMPLES / 'program_1.rs')])
    out = capsys.readouterr().out.strip()
    assert out == 'a ↦ 1\nb ↦ &a\nc ↦ 1'
