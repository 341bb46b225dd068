from __future__ import annotations

from enum import Enum


class Subject(str, Enum):
    """Asignaturas del liceo; the value is the label shown and stored."""

    LENGUA_LITERATURA = "Lengua y Literatura"
    MATEMATICA = "Matemática"
    CIENCIAS = "Ciencias"
    CIENCIAS_CIUDADANIA = "Ciencias para la ciudadanía"
    HISTORIA = "Historia"
    EDUCACION_CIUDADANA = "Educación Ciudadana"
    FILOSOFIA = "Filosofía"
    INGLES = "Inglés"
    PENSAMIENTO_LOGICO = "Pensamiento Lógico"
    COMPETENCIA_LECTORA = "Competencia Lectora"
    ARTES = "Artes"
    MUSICA = "Música"
    EDUCACION_FISICA = "Educación Física"
    EMPRENDIMIENTO = "Emprendimiento"
    MECANICA_AUTOMOTRIZ = "Mecánica Automotriz"
    MECANICA_INDUSTRIAL = "Mecánica Industrial"
    TECNOLOGIA = "Tecnología"


class CoverageType(str, Enum):
    """Outcome of a substitution, fixed when the record is created."""

    COVERED = "Horas cubiertas"
    ACCOUNTED_NOT_DONE = "Hora contabilizada pero no hecha"


ALL_SUBJECTS: tuple[Subject, ...] = tuple(Subject)
