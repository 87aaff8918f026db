from pathlib import Path

from refmodel.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_4_assign_through_deref_chain(capsys):
    main([str(EXAMPLES / 'program_4.rs')])
    out = capsys.readouterr().out.strip()
    # the write lands on the final referent, both references are untouched
    assert out == 'a ↦ 5\nb ↦ &a\nc ↦ &b'
