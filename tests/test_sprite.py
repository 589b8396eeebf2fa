from dataclasses import replace

import pytest

from cryptcrawl.sprite import AnimatedSprite, Sprite
from cryptcrawl.vec import Vec


def _frames(count):
    return [Sprite(texture_id=i, size=Vec(16, 16)) for i in range(count)]


def test_default_sprite_has_no_texture():
    assert Sprite().texture_id == -1


def test_restore_copies_all_fields():
    original = Sprite(texture_id=2, shift=Vec(1, 2), angle=20.0)
    saved = replace(original)
    original.angle = 135.0
    original.shift = original.shift + Vec(0, -12)
    original.flip = True
    original.restore(saved)
    assert original == saved


def test_default_animation_has_one_frame():
    animation = AnimatedSprite()
    assert animation.number_of_frames() == 1
    assert animation.current() == Sprite()


def test_empty_frames_rejected():
    with pytest.raises(ValueError):
        AnimatedSprite([])


def test_animation_loops_back_to_start():
    animation = AnimatedSprite(_frames(3), 1)
    first = animation.current()
    seen = [first.texture_id]
    for _ in range(animation.number_of_frames()):
        animation.update()
        seen.append(animation.current().texture_id)
    assert seen[-1] == first.texture_id
    assert sorted(seen[:-1]) == [0, 1, 2]


def test_starting_frame():
    animation = AnimatedSprite(_frames(4), 1, starting_frame=2)
    assert animation.current().texture_id == 2


def test_invisible_animation_does_not_advance():
    animation = AnimatedSprite(_frames(3), 1)
    animation.visible = False
    for _ in range(5):
        animation.update()
    assert animation.current().texture_id == 0


def test_ticks_per_frame_delays_first_advance():
    animation = AnimatedSprite(_frames(3), ticks_per_frame=3)
    animation.update()
    animation.update()
    assert animation.current().texture_id == 0
    animation.update()
    assert animation.current().texture_id == 1


def test_flip_applies_to_every_frame():
    animation = AnimatedSprite(_frames(3), 1)
    animation.flip(True)
    flips = []
    for _ in range(3):
        flips.append(animation.current().flip)
        animation.update()
    assert flips == [True, True, True]


def test_current_returns_independent_copy():
    animation = AnimatedSprite(_frames(2), 1)
    sprite = animation.current()
    sprite.angle = 90.0
    assert animation.current().angle == 0.0


def test_frames_are_copied_from_input():
    frames = _frames(2)
    animation = AnimatedSprite(frames, 1)
    frames[0].texture_id = 99
    assert animation.current().texture_id == 0