"""Simulation settings read from a JSON file, and small filesystem helpers."""

from __future__ import annotations

import contextlib
import json
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from scattersim.rho import ScatteringVector


class SimType(Enum):
    """Dimensionality of the scattering calculation."""

    ONE_DIM = "1D"
    TWO_DIM = "2D"


class ScattType(Enum):
    """Structure factor of point centres (Sq) or full intensity of particle volumes (Iq)."""

    SQ = "Sq"
    IQ = "Iq"


class SettingsError(ValueError):
    """Raised when a settings file cannot be read or holds invalid values."""


def list_files_in_dir(path: str | os.PathLike[str]) -> list[str]:
    """Names of the entries of a directory, sorted."""
    return sorted(os.listdir(path))


def directory_exists(path: str | os.PathLike[str]) -> bool:
    """True if the path exists and is a directory."""
    return os.path.isdir(path)


def make_directory(path: str | os.PathLike[str]) -> None:
    """Create a single directory; an existing one is left alone."""
    with contextlib.suppress(FileExistsError):
        os.mkdir(path, 0o755)


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"Error parsing JSON: {what} must be a number, got {value!r}")
    return float(value)


def _string(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise SettingsError(f"Error parsing JSON: {what} must be a string, got {value!r}")
    return value


def _required(data: dict[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SettingsError(f"Error parsing JSON: missing key {key!r}") from None


def _parse_vector(entry: Any) -> ScatteringVector:
    if not isinstance(entry, dict):
        raise SettingsError(f"Error parsing JSON: scattering vector must be an object, got {entry!r}")
    direction = _required(entry, "direction")
    if not isinstance(direction, list) or len(direction) < 3:
        raise SettingsError(f"Error parsing JSON: direction must list three numbers, got {direction!r}")
    vector = ScatteringVector()
    vector.q_axis = tuple(_number(v, "direction") for v in direction[:3])  # type: ignore[assignment]
    if "qmin" in entry:
        vector.qmin = _number(entry["qmin"], "qmin")
    if "qmax" in entry:
        vector.qmax = _number(entry["qmax"], "qmax")
    if "dq" in entry:
        vector.dq = _number(entry["dq"], "dq")
    return vector


@dataclass
class SimulationSettings:
    """Everything a scattering simulation needs to know before it starts."""

    sim_type: SimType = SimType.ONE_DIM
    scatt_type: ScattType = ScattType.SQ
    scatt_vectors: list[ScatteringVector] = field(default_factory=list)
    rho_sp: float = 1.0
    configuration_folder: str = ""
    configuration_files: list[str] = field(default_factory=list)
    output_folder: str = "Data/rho1D/"
    save_cogli2: bool = False
    cogli2_folder: str = "Cogli2/"

    def load_settings(self, path: str | os.PathLike[str]) -> None:
        """Read the JSON settings file, creating output folders that do not exist yet."""
        try:
            with open(path, encoding="utf-8") as file_in:
                data = json.load(file_in)
        except OSError as exc:
            raise SettingsError(f"Error opening {os.fspath(path)}") from exc
        except json.JSONDecodeError as exc:
            raise SettingsError(f"Error parsing JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError("Error parsing JSON: settings must be an object")

        sim_type = _required(data, "simType")
        if sim_type != SimType.ONE_DIM.value:
            raise SettingsError(f"Error parsing JSON: Unknown simType: {sim_type}")
        self.sim_type = SimType.ONE_DIM

        scatt_type = _required(data, "scattType")
        try:
            self.scatt_type = ScattType(scatt_type)
        except ValueError:
            raise SettingsError(f"Error parsing JSON: Unknown scattType: {scatt_type}") from None

        if "scattVectors" in data:
            entries = data["scattVectors"]
            if not isinstance(entries, list):
                raise SettingsError("Error parsing JSON: scattVectors must be a list")
            self.scatt_vectors.extend(_parse_vector(entry) for entry in entries)

        if "rhoSP" in data:
            self.rho_sp = _number(data["rhoSP"], "rhoSP")

        if "configurationsFolder" in data:
            self.configuration_folder = _string(data["configurationsFolder"], "configurationsFolder")
            try:
                self.configuration_files = list_files_in_dir(self.configuration_folder)
            except OSError as exc:
                raise SettingsError(f"Cannot open directory: {self.configuration_folder}") from exc

        if "outputFolder" in data:
            self.output_folder = _string(data["outputFolder"], "outputFolder")
            if not directory_exists(self.output_folder):
                make_directory(self.output_folder)

        if "saveCogli2" in data:
            save = data["saveCogli2"]
            if not isinstance(save, bool):
                raise SettingsError(f"Error parsing JSON: saveCogli2 must be a boolean, got {save!r}")
            self.save_cogli2 = save
            if save and "cogli2Folder" in data:
                self.cogli2_folder = _string(data["cogli2Folder"], "cogli2Folder")
                if not directory_exists(self.cogli2_folder):
                    make_directory(self.cogli2_folder)