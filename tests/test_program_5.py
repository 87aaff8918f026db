from pathlib import Path

from refmodel.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_5_write_through_mut_reference(capsys):
    main([str(EXAMPLES / 'program_5.rs')])
    out = capsys.readouterr().out.strip()
    assert out == 'r ↦ &x\nx ↦ 20\ny ↦ 20'
