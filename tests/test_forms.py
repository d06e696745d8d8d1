import pytest

from core.forms import (
    ConfirmDialog,
    ConfirmKind,
    FormError,
    SongField,
    SongForm,
    SongFormOverlay,
    SongPicker,
)
from db.models import Song

COMPOSERS = ("Arvo Pärt", "Bach", "Bruckner", "Byrd")


def composer_form(text=""):
    form = SongForm(active=SongField.COMPOSER)
    for ch in text:
        form.push_char(ch)
        form.update_suggestion(COMPOSERS)
    return form


def test_fields_cycle():
    form = SongForm()
    form.next_field()
    assert form.active is SongField.COMPOSER
    form.next_field()
    form.next_field()
    assert form.active is SongField.TITLE
    form.previous_field()
    assert form.active is SongField.LINK


def test_typing_goes_to_active_field():
    form = SongForm()
    for ch in "Kyrie":
        form.push_char(ch)
    form.next_field()
    form.push_char("X")
    form.backspace()
    form.next_field()
    form.push_char("u")
    assert (form.title, form.composer, form.link) == ("Kyrie", "", "u")


def test_title_is_required():
    form = SongForm(title="   ", composer="Bach")
    with pytest.raises(FormError, match="Song title is required."):
        form.parse_inputs()


def test_inputs_are_trimmed():
    form = SongForm(title=" Ave Maria ", composer=" Bach ", link=" http://x ")
    assert form.parse_inputs() == ("Ave Maria", "Bach", "http://x")


def test_typing_clears_error():
    form = SongForm(error="Song title is required.")
    form.push_char("A")
    assert form.error is None


def test_no_suggestion_before_two_chars():
    form = composer_form("B")
    assert form.suggestion is None


def test_first_prefix_match_is_suggested():
    form = composer_form("br")
    assert form.suggestion == "Bruckner"
    assert form.suggestion_suffix() == "uckner"
    assert form.has_active_suggestion()


def test_exact_match_has_no_suggestion():
    assert composer_form("bach").suggestion is None


def test_accepting_fills_the_field_and_disables():
    form = composer_form("By")
    assert form.accept_suggestion()
    assert form.composer == "Byrd"
    form.update_suggestion(COMPOSERS)
    assert form.suggestion is None


def test_dismissing_lasts_until_next_edit():
    form = composer_form("Br")
    assert form.cancel_autocomplete()
    form.update_suggestion(COMPOSERS)
    assert form.suggestion is None

    form.push_char("u")
    form.update_suggestion(COMPOSERS)
    assert form.suggestion == "Bruckner"


def test_suggestion_only_on_composer_field():
    form = composer_form("Br")
    form.next_field()
    assert form.suggestion is None
    assert not form.cancel_autocomplete()


def test_form_from_song():
    song = Song(3, "Locus Iste", "Bruckner", "http://x")
    overlay = SongFormOverlay(form=SongForm.from_song(song), song_id=song.id)
    assert not overlay.creating
    assert overlay.heading == "Edit Song"
    assert overlay.form.value(SongField.LINK) == "http://x"
    assert SongFormOverlay().heading == "Create Song"


def test_confirm_prompts():
    song = Song(1, "Ave Maria", "Bach")
    assert "from this binder" in ConfirmDialog(ConfirmKind.REMOVE_FROM_BINDER, song, 1).prompt
    assert "Ave Maria - Bach" in ConfirmDialog(ConfirmKind.DELETE_SONG, song).prompt


def test_picker_checks_songs_but_not_create_row():
    songs = [Song(1, "Ave Maria"), Song(2, "Kyrie"), Song(3, "Locus Iste")]
    picker = SongPicker.with_songs(7, songs)
    assert picker.current_item() is None

    picker.toggle_current()
    assert picker.checked == set()

    picker.move_selection(1)
    picker.toggle_current()
    picker.select_last()
    picker.toggle_current()
    assert picker.checked_songs() == [songs[0], songs[2]]
    assert picker.is_checked(1) and not picker.is_checked(2)

    picker.toggle_current()
    assert picker.checked_songs() == [songs[0]]


def test_picker_cursor_bounds():
    picker = SongPicker.with_songs(1, [Song(i, f"S{i}") for i in range(3)])
    picker.page_down()
    assert picker.selected == 3
    picker.page_up()
    assert picker.selected == 0
    picker.move_selection(-1)
    assert picker.selected == 0
