from xenvox.app.events import (
    Closed, CursorMoved, Other, PointerPress, PointerRelease, Resized,
    Redraw, ResizeTarget, Shutdown, Transmit,
)
from xenvox.app.model import Model, draw_model, reduce
from xenvox.osc.messages import NoteOff, NoteOn
from xenvox.tuning.tree import RatioTree
from xenvox.ui.draw import DrawBatch, ScreenSize


def test_create_uses_config_defaults(config):
    model = Model.create(config)
    assert model.tree.depth == 8
    assert model.grid.edos == (12, 31, 53)
    assert model.screen == ScreenSize(960.0, 600.0)
    assert model.cursor.pos == 0.0


def test_cursor_moved_updates_position_only(config, dispatcher):
    model = Model.create(config)
    model, effects = reduce(model, CursorMoved(480.0, 120.0), dispatcher)
    assert model.cursor.pos == 480.0
    assert effects == [Redraw()]


def test_press_emits_note_on_from_current_cursor(config, dispatcher):
    model = Model.create(config)
    model, _ = reduce(model, CursorMoved(480.0), dispatcher)
    model, effects = reduce(model, PointerPress(1), dispatcher)
    assert effects == [Transmit(NoteOn(1, 6.0, 0.5)), Redraw()]


def test_release_emits_note_off(config, dispatcher):
    model = Model.create(config)
    model, _ = reduce(model, CursorMoved(123.0), dispatcher)
    model, effects = reduce(model, PointerRelease(1), dispatcher)
    assert effects == [Transmit(NoteOff(1)), Redraw()]


def test_reducer_never_sends(config, dispatcher, transport):
    model = Model.create(config)
    reduce(model, PointerPress(1), dispatcher)
    reduce(model, PointerRelease(1), dispatcher)
    assert transport.packets == []


def test_resize_changes_only_screen_size(config, dispatcher):
    model = Model.create(config)
    model, _ = reduce(model, CursorMoved(300.0), dispatcher)
    tree_before = RatioTree().set_layers_number(8)
    edos_before = model.grid.edos

    model, effects = reduce(model, Resized(1280, 720), dispatcher)

    assert model.screen == ScreenSize(1280.0, 720.0)
    assert effects == [ResizeTarget(ScreenSize(1280.0, 720.0)), Redraw()]
    assert model.tree == tree_before
    assert model.grid.edos == edos_before
    assert model.cursor.pos == 300.0


def test_pitch_follows_new_width_after_resize(config, dispatcher):
    model = Model.create(config)
    model, _ = reduce(model, CursorMoved(480.0), dispatcher)
    model, _ = reduce(model, Resized(1920, 600), dispatcher)
    assert model.pitch == 3.0


def test_other_events_still_request_redraw(config, dispatcher):
    model = Model.create(config)
    model, effects = reduce(model, Other("key"), dispatcher)
    assert effects == [Redraw()]
    assert model.cursor.pos == 0.0


def test_closed_shuts_down_after_a_final_frame(config, dispatcher):
    model = Model.create(config)
    _, effects = reduce(model, Closed(), dispatcher)
    assert effects == [Shutdown(), Redraw()]


def test_press_on_zero_width_screen_sends_nothing(config, dispatcher):
    model = Model.create(config)
    model, _ = reduce(model, Resized(0, 0), dispatcher)
    model, effects = reduce(model, PointerPress(1), dispatcher)
    assert effects == [Redraw()]
    model, effects = reduce(model, PointerRelease(1), dispatcher)
    assert effects == [Transmit(NoteOff(channel=1)), Redraw()]


def test_draw_model_order(config):
    config.tree.layers = 2
    config.grid.edos = (12,)
    model = Model.create(config)
    batch = DrawBatch()
    draw_model(model, batch)

    commands = list(batch.commands())
    assert len(commands) == 12 + 7 + 1
    # Grid ticks first, cursor band last
    assert commands[0] == batch.rects[0]
    assert commands[-1] == batch.rects[-1]
    assert batch.rects[-1].color[3] == 0.7
