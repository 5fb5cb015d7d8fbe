"""Running the scattering simulation over every configuration, and the command entry point."""

from __future__ import annotations

import dataclasses
import os
import sys
from typing import Sequence

from scattersim.geometry import write_box
from scattersim.particles import ConfigurationError, ParticleSystem
from scattersim.rho import Rho1D
from scattersim.settings import SettingsError, SimulationSettings, directory_exists, make_directory
from scattersim.system import ScatteringSystem


def _strip_extension(name: str) -> str:
    dot = name.rfind(".")
    return name if dot < 0 else name[:dot]


class ScatteringSimulation:
    """Computes 1D scattering intensities for each configuration listed in the settings."""

    def __init__(self, settings: SimulationSettings | str | os.PathLike[str] | None = None) -> None:
        if settings is None:
            settings = SimulationSettings()
        elif not isinstance(settings, SimulationSettings):
            path = settings
            settings = SimulationSettings()
            settings.load_settings(path)
        self.settings = settings

    def start_simulation(self) -> list[str]:
        """Process every configuration and return the paths of the intensity files written."""
        settings = self.settings
        written: list[str] = []
        print(f"#Total configurations: {len(settings.configuration_files)}")

        for conf_name in settings.configuration_files:
            print(f"Configuration {conf_name}")
            stem = _strip_extension(conf_name)

            particle_system = ParticleSystem(settings.configuration_folder + "/" + conf_name)
            scattering_system = ScatteringSystem(settings.scatt_type)
            scattering_system.generate_scattering_points(particle_system.particles)

            if settings.save_cogli2:
                cogli2_file = settings.cogli2_folder + stem + ".mgl"
                write_box(particle_system.lbox, cogli2_file)
                scattering_system.write_cogli2(particle_system.lbox, cogli2_file, True)

            print(f"Number of scattering points: {scattering_system.nsp}")

            output_folder = settings.output_folder + stem
            if not directory_exists(output_folder):
                make_directory(output_folder)

            for vector in settings.scatt_vectors:
                scattering_system.vec_rho1d.append(Rho1D(dataclasses.replace(vector, q_values=[])))

            for index, rho1d in enumerate(scattering_system.vec_rho1d):
                rho1d.q_vector.build_q_values()
                rho1d.calculate_rho(scattering_system.scattering_points)
                out_file = f"{output_folder}/axis_{index}.txt"
                rho1d.export_data(scattering_system.nsp, out_file)
                written.append(out_file)

        return written


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation described by the settings file given as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Error, choose the settings file.", file=sys.stderr)
        return 1
    try:
        simulation = ScatteringSimulation(args[0])
        simulation.start_simulation()
    except (SettingsError, ConfigurationError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0