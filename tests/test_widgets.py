"""
Tests para core/widgets.py - Contador de caracteres y visor de archivos.
"""

from portfolio_forms.core import CharacterCounter, FileSelector
from portfolio_forms.models import FormField, FieldType, SelectedFile


MB = 1024 * 1024


class TestCharacterCounter:
    """Tests para CharacterCounter."""

    def test_initial_text(self):
        fld = FormField(name="message", field_type=FieldType.TEXTAREA, max_length=500)
        counter = CharacterCounter(fld)
        assert counter.text == "0 / 500"
        assert not counter.limit_reached

    def test_limit_reached_at_max(self):
        fld = FormField(name="message", field_type=FieldType.TEXTAREA, max_length=500)
        counter = CharacterCounter(fld)
        fld.value = "x" * 500
        assert counter.update() == "500 / 500"
        assert counter.limit_reached

    def test_stays_flagged_past_max(self):
        fld = FormField(name="message", field_type=FieldType.TEXTAREA, max_length=500)
        counter = CharacterCounter(fld)
        fld.value = "x" * 501
        counter.update()
        assert counter.text == "501 / 500"
        assert counter.remaining == -1
        assert counter.limit_reached

    def test_flag_cleared_when_text_shrinks(self):
        fld = FormField(name="message", max_length=3, value="abc")
        counter = CharacterCounter(fld)
        assert counter.limit_reached
        fld.value = "ab"
        counter.update()
        assert not counter.limit_reached

    def test_max_length_priority(self):
        fld = FormField(name="message", max_length=200)
        assert CharacterCounter(fld, max_length=100).max_length == 100
        assert CharacterCounter(fld).max_length == 200
        assert CharacterCounter(FormField(name="bio")).max_length == 500


class TestFileSelector:
    """Tests para FileSelector."""

    def test_lists_file_names(self):
        fld = FormField(name="attachment", field_type=FieldType.FILE)
        selector = FileSelector(fld)
        accepted = selector.select([
            SelectedFile("cv.pdf", 200_000),
            SelectedFile("portfolio.zip", 4 * MB),
        ])
        assert accepted
        assert selector.display == "cv.pdf, portfolio.zip"
        assert selector.error is None

    def test_oversized_file_clears_selection(self):
        errors = []
        fld = FormField(name="attachment", field_type=FieldType.FILE)
        selector = FileSelector(fld, on_error=errors.append)
        accepted = selector.select([
            SelectedFile("big.mov", 6 * MB),
            SelectedFile("huge.mov", 60 * MB),
            SelectedFile("small.txt", 10),
        ])
        assert not accepted
        assert errors == ["File size must be less than 5MB"]
        assert selector.files == []
        assert selector.display == ""
        assert fld.value == ""

    def test_exactly_at_limit_is_accepted(self):
        fld = FormField(name="attachment", field_type=FieldType.FILE)
        selector = FileSelector(fld)
        assert selector.select([SelectedFile("edge.bin", 5 * MB)])

    def test_empty_selection_clears_display(self):
        fld = FormField(name="attachment", field_type=FieldType.FILE)
        selector = FileSelector(fld)
        selector.select([SelectedFile("cv.pdf", 10)])
        assert selector.select([])
        assert selector.display == ""

    def test_custom_ceiling_message(self):
        errors = []
        fld = FormField(name="attachment", field_type=FieldType.FILE)
        selector = FileSelector(fld, max_size=2 * MB, on_error=errors.append)
        selector.select([SelectedFile("photo.jpg", 3 * MB)])
        assert errors == ["File size must be less than 2MB"]
