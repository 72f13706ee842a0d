# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Facade: one call drives a home theater made of four subsystems.

The subsystems stay public; the facade only orders the calls for the
common case.
"""

from __future__ import annotations

from typing import Optional

from patternbook.core.demo import PatternCategory, demo


class Amplifier:
    def on(self) -> None:
        print("Amplifier on")

    def set_volume(self, level: int) -> None:
        print(f"Amplifier volume set to {level}")

    def off(self) -> None:
        print("Amplifier off")


class DVDPlayer:
    def __init__(self) -> None:
        self.current_movie: Optional[str] = None

    def on(self) -> None:
        print("DVD Player on")

    def play(self, movie: str) -> None:
        self.current_movie = movie
        print(f'Playing "{movie}"')

    def off(self) -> None:
        self.current_movie = None
        print("DVD Player off")


class Projector:
    def on(self) -> None:
        print("Projector on")

    def wide_screen_mode(self) -> None:
        print("Projector set to widescreen mode")

    def off(self) -> None:
        print("Projector off")


class Lights:
    def dim(self, level: int) -> None:
        print(f"Lights dimmed to {level}%")

    def on(self) -> None:
        print("Lights on")


class HomeTheaterFacade:
    def __init__(
        self,
        amplifier: Amplifier,
        dvd_player: DVDPlayer,
        projector: Projector,
        lights: Lights,
    ):
        self.amplifier = amplifier
        self.dvd_player = dvd_player
        self.projector = projector
        self.lights = lights

    def watch_movie(self, movie: str) -> None:
        print("Get ready to watch a movie...")
        self.lights.dim(10)
        self.projector.on()
        self.projector.wide_screen_mode()
        self.amplifier.on()
        self.amplifier.set_volume(5)
        self.dvd_player.on()
        self.dvd_player.play(movie)

    def end_movie(self) -> None:
        print("Shutting movie theater down...")
        self.dvd_player.off()
        self.amplifier.off()
        self.projector.off()
        self.lights.on()


@demo("facade", title="Facade", category=PatternCategory.STRUCTURAL)
def main() -> None:
    theater = HomeTheaterFacade(Amplifier(), DVDPlayer(), Projector(), Lights())
    theater.watch_movie("Inception")
    theater.end_movie()


if __name__ == "__main__":
    main()
