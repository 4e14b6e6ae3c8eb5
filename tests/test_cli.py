import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import yaml
from typer.testing import CliRunner

from simpunifac import __version__
from simpunifac.cli import app
from simpunifac.errors import (
    GroupSemanticError,
    GroupTokenError,
    InputFileError,
    OutputFileError,
)

DOCUMENT = {
    "temperature": 298,
    "substances": {
        "ethanole": {"fraction": 0.5, "groups": ["1:2", "2:1", "14:1"]},
        "benzene": {"fraction": 0.5, "groups": ["9:6"]},
    },
}


class TestRunCommand(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, name, document):
        path = self.dir / name
        if path.suffix == ".json":
            path.write_text(json.dumps(document))
        else:
            path.write_text(yaml.safe_dump(document, sort_keys=False))
        return path

    def test_yaml_to_stdout(self):
        path = self.write("mix.yaml", DOCUMENT)
        result = self.runner.invoke(app, ["run", str(path)])

        self.assertEqual(result.exit_code, 0, result.output)
        output = yaml.safe_load(result.stdout)
        self.assertEqual(set(output["substances"]), {"ethanole", "benzene"})
        for entry in output["substances"].values():
            self.assertIsInstance(entry["gamma"], float)

    def test_json_to_output_file(self):
        path = self.write("mix.json", DOCUMENT)
        target = self.dir / "out.json"
        result = self.runner.invoke(app, ["run", str(path), "-o", str(target), "--model", "ideal"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout, "")
        output = json.loads(target.read_text())
        self.assertEqual(output["substances"]["benzene"], {"fraction": 0.5, "groups": ["9:6"], "gamma": 1.0})

    def test_model_from_environment(self):
        path = self.write("mix.yaml", DOCUMENT)
        result = self.runner.invoke(app, ["run", str(path)], env={"SIMPUNIFAC_MODEL": "ideal"})
        self.assertEqual(result.exit_code, 0, result.output)
        gammas = [entry["gamma"] for entry in yaml.safe_load(result.stdout)["substances"].values()]
        self.assertEqual(gammas, [1.0, 1.0])

    def test_bad_token_exit_code(self):
        document = json.loads(json.dumps(DOCUMENT))
        document["substances"]["benzene"]["groups"] = ["x:2"]
        path = self.write("mix.yaml", document)
        result = self.runner.invoke(app, ["run", str(path)])

        self.assertEqual(result.exit_code, GroupTokenError.exit_code)
        self.assertIn("benzene", result.output)
        self.assertNotIn("gamma", result.output)

    def test_unknown_group_exit_code(self):
        document = json.loads(json.dumps(DOCUMENT))
        document["substances"]["ethanole"]["groups"] = ["1:2", "0:1"]
        path = self.write("mix.yaml", document)
        target = self.dir / "out.yaml"
        result = self.runner.invoke(app, ["run", str(path), "--output", str(target)])

        self.assertEqual(result.exit_code, GroupSemanticError.exit_code)
        self.assertIn("ethanole", result.output)
        self.assertFalse(target.exists())

    def test_unreadable_input_skips_pipeline(self):
        with mock.patch("simpunifac.cli.Pipeline") as pipeline:
            result = self.runner.invoke(app, ["run", str(self.dir / "missing.yaml")])

        self.assertEqual(result.exit_code, InputFileError.exit_code)
        self.assertIn("could not be read", result.output)
        pipeline.assert_not_called()

    def test_unwritable_output(self):
        path = self.write("mix.yaml", DOCUMENT)
        target = self.dir / "no-such-dir" / "out.yaml"
        result = self.runner.invoke(app, ["run", str(path), "-o", str(target), "--model", "ideal"])
        self.assertEqual(result.exit_code, OutputFileError.exit_code)


class TestVersionOption(unittest.TestCase):
    def test_version(self):
        result = CliRunner().invoke(app, ["--version"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.stdout.strip(), f"simpunifac {__version__}")


class TestGroupsCommand(unittest.TestCase):
    def test_lists_subgroups(self):
        result = CliRunner().invoke(app, ["groups"])
        self.assertEqual(result.exit_code, 0, result.output)
        first = result.stdout.splitlines()[0].split()
        self.assertEqual(first[:2], ["1", "CH3"])


if __name__ == '__main__':
    unittest.main()
