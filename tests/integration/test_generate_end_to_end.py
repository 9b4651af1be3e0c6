"""
End-to-end generation over temporary icon source trees
"""
import json
import re
import pytest

from generate_icons import main
from weights import Weight

ARROW_UP_BRANCH = '[ S.path [ A.d "M1 1" ] [] ]'


@pytest.fixture
def outputs(tmp_path):
    return tmp_path / "src" / "Phosphor.elm", tmp_path / "example" / "src" / "Test.elm"


def run_generator(assets, outputs, *extra):
    module_path, demo_path = outputs
    code = main([
        "--skip-submodule",
        "--assets-path", str(assets),
        "--output", str(module_path),
        "--demo-output", str(demo_path),
        *extra,
    ])
    return code, module_path.read_text(encoding="utf-8"), demo_path.read_text(encoding="utf-8")


def exposed_names(module_text):
    header = module_text.split(")\n", 1)[0].split("exposing", 1)[1]
    return [name.strip() for name in re.split(r"[(),]", header) if name.strip()]


def weight_branch(module_text, name, weight):
    body = module_text.split(f"\n{name} weight =\n", 1)[1].split("makeBuilder elements", 1)[0]
    return body.split(f"{weight.label} ->\n", 1)[1].split("\n", 1)[0].strip()


class TestArrowUpScenario:
    """An icon with six trivial weight files generates arrowUp"""

    def test_weight_layout(self, weight_tree, all_weights, outputs):
        assets = weight_tree({"arrow-up": all_weights()})
        code, module_text, demo_text = run_generator(assets, outputs)

        assert code == 0
        assert "arrowUp" in exposed_names(module_text)
        for weight in Weight:
            assert weight_branch(module_text, "arrowUp", weight) == ARROW_UP_BRANCH
        assert "Phosphor.arrowUp model.weight |> toHtml []" in demo_text

    def test_icon_layout(self, icon_tree, all_weights, outputs):
        assets = icon_tree({"arrow-up": all_weights()})
        code, module_text, _ = run_generator(assets, outputs)

        assert code == 0
        for weight in Weight:
            assert weight_branch(module_text, "arrowUp", weight) == ARROW_UP_BRANCH


class TestCatalogRun:
    """Catalog-driven generation with aliases and failures"""

    @pytest.fixture
    def catalog(self, tmp_path):
        path = tmp_path / "icons.json"
        path.write_text(json.dumps([
            {"name": "arrow-up", "pascal_name": "ArrowUp"},
            {"name": "cube", "pascal_name": "Cube"},
            {
                "name": "file-text",
                "pascal_name": "FileText",
                "alias": {"name": "file-doc", "pascal_name": "FileDoc"},
            },
        ]), encoding="utf-8")
        return path

    def test_generated_module(self, weight_tree, all_weights, outputs, catalog, capsys):
        incomplete = all_weights()
        del incomplete[Weight.DUOTONE]
        assets = weight_tree({
            "arrow-up": all_weights(),
            "cube": incomplete,
            "file-text": all_weights('<svg><g><circle r="8" fill="#000"/></g></svg>'),
        })

        code, module_text, demo_text = run_generator(assets, outputs, "--catalog", str(catalog))
        assert code == 0

        names = exposed_names(module_text)
        for name in ["arrowUp", "fileText", "fileDoc"]:
            assert names.count(name) == 1
            assert module_text.count(f"\n{name} : Icon\n") == 1

        # Incomplete icons are left out entirely
        assert "cube" not in names
        assert "\ncube " not in module_text
        assert "Phosphor.cube" not in demo_text

        # The alias renders nothing of its own and delegates to its target
        alias_body = module_text.split("\nfileDoc =\n", 1)[1].split("\n\n", 1)[0]
        assert alias_body.strip() == "fileText"
        assert weight_branch(module_text, "fileText", Weight.BOLD) == \
            '[ S.g [] [ S.circle [ A.r "8", A.fill "currentColor" ] [] ] ]'

        out = capsys.readouterr()
        assert "2 components generated" in out.out
        assert "1 component failed" in out.out
        assert "cube is missing weights" in out.err

    def test_output_is_reproducible(self, weight_tree, all_weights, outputs, catalog):
        assets = weight_tree({name: all_weights() for name in ["arrow-up", "cube", "file-text"]})
        _, first_module, first_demo = run_generator(assets, outputs, "--catalog", str(catalog))
        _, second_module, second_demo = run_generator(assets, outputs, "--catalog", str(catalog))
        assert first_module == second_module
        assert first_demo == second_demo

    def test_limit(self, weight_tree, all_weights, outputs, catalog):
        assets = weight_tree({name: all_weights() for name in ["arrow-up", "cube", "file-text"]})
        _, module_text, _ = run_generator(assets, outputs, "--catalog", str(catalog), "--limit", "1")
        assert exposed_names(module_text)[-1] == "arrowUp"
        assert "cube" not in exposed_names(module_text)


class TestOutputPreservation:
    """Fatal errors leave previous outputs untouched"""

    def test_bad_folder_keeps_previous_module(self, weight_tree, all_weights, outputs):
        module_path, demo_path = outputs
        module_path.parent.mkdir(parents=True)
        module_path.write_text("previous", encoding="utf-8")

        assets = weight_tree({"arrow-up": all_weights()})
        (assets / "ultra").mkdir()
        code = main([
            "--skip-submodule",
            "--assets-path", str(assets),
            "--output", str(module_path),
            "--demo-output", str(demo_path),
        ])

        assert code == 1
        assert module_path.read_text(encoding="utf-8") == "previous"
        assert not demo_path.exists()

    def test_failed_demo_write_keeps_previous_module(self, weight_tree, all_weights, tmp_path, capsys):
        module_path = tmp_path / "src" / "Phosphor.elm"
        module_path.parent.mkdir(parents=True)
        module_path.write_text("previous", encoding="utf-8")
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        assets = weight_tree({"arrow-up": all_weights()})
        code = main([
            "--skip-submodule",
            "--assets-path", str(assets),
            "--output", str(module_path),
            "--demo-output", str(blocker / "Test.elm"),
        ])

        assert code == 1
        assert "Writing file failed" in capsys.readouterr().err
        assert module_path.read_text(encoding="utf-8") == "previous"
        assert sorted(p.name for p in module_path.parent.iterdir()) == ["Phosphor.elm"]


class TestUndecodableSource:
    """A source file that is not valid UTF-8 affects only its own icon"""

    def test_batch_continues(self, weight_tree, all_weights, outputs, caplog):
        assets = weight_tree({"cube": all_weights(), "broken": all_weights()})
        (assets / "bold" / "broken-bold.svg").write_bytes(b'<svg>\xff<path d="M1 1"></svg>')

        code, module_text, demo_text = run_generator(assets, outputs)

        assert code == 0
        assert "cube" in exposed_names(module_text)
        assert "broken" not in exposed_names(module_text)
        assert "Phosphor.cube" in demo_text
        assert "broken-bold.svg is not valid UTF-8" in caplog.text

    def test_replacement_in_attribute_still_generates(self, weight_tree, all_weights, outputs):
        assets = weight_tree({"cube": all_weights()})
        (assets / "bold" / "cube-bold.svg").write_bytes(b'<svg><path d="M1 1" id="\xff"/></svg>')

        code, module_text, _ = run_generator(assets, outputs)

        assert code == 0
        assert weight_branch(module_text, "cube", Weight.BOLD) == '[ S.path [ A.d "M1 1", A.id "\ufffd" ] [] ]'
