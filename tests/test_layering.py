import subprocess
import sys


def test_proquint_core_does_not_import_cli():
    proc = subprocess.run(
        [
            sys.executable,
            "-c",
            "import sys; import proquint_core; "
            "print('proquint_phrase' in sys.modules)",
        ],
        capture_output=True,
        text=True,
        timeout=30,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "False"


def test_cli_reexports_core_conversion_functions():
    import proquint_core as core
    import proquint_phrase as cli

    assert cli.encode is core.encode
    assert cli.decode is core.decode
    assert cli.random_phrase is core.random_phrase
    assert cli.to_phrase is core.to_phrase
