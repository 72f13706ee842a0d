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

"""Bridge: remotes (abstraction) and devices (implementation) vary independently.

Any remote works with any device, so N remotes and M devices need N + M
classes instead of N * M.
"""

from __future__ import annotations

from abc import ABC

from patternbook.core.demo import PatternCategory, demo

VOLUME_STEP = 10
MIN_VOLUME = 0
MAX_VOLUME = 100


class Device(ABC):
    """Implementor: state shared by every device, reported by name."""

    name = "Device"

    def __init__(self, volume: int = 30):
        self._on = False
        self._volume = volume

    def is_enabled(self) -> bool:
        return self._on

    def enable(self) -> None:
        self._on = True
        print(f"{self.name} is now ON")

    def disable(self) -> None:
        self._on = False
        print(f"{self.name} is now OFF")

    @property
    def volume(self) -> int:
        return self._volume

    def set_volume(self, volume: int) -> None:
        self._volume = max(MIN_VOLUME, min(MAX_VOLUME, volume))
        if self._volume == MIN_VOLUME:
            print(f"{self.name} muted")
        else:
            print(f"{self.name} volume set to {self._volume}")


class TV(Device):
    name = "TV"


class Radio(Device):
    name = "Radio"


class RemoteControl:
    """Abstraction: talks to a device only through the Device interface."""

    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> None:
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

    def volume_up(self) -> None:
        self.device.set_volume(self.device.volume + VOLUME_STEP)

    def volume_down(self) -> None:
        self.device.set_volume(self.device.volume - VOLUME_STEP)


class AdvancedRemote(RemoteControl):
    def mute(self) -> None:
        self.device.set_volume(MIN_VOLUME)


@demo("bridge", title="Bridge", category=PatternCategory.STRUCTURAL)
def main() -> None:
    tv_remote = RemoteControl(TV())
    tv_remote.toggle_power()
    tv_remote.volume_up()

    radio_remote = AdvancedRemote(Radio())
    radio_remote.toggle_power()
    radio_remote.volume_down()
    radio_remote.mute()
    radio_remote.toggle_power()


if __name__ == "__main__":
    main()
