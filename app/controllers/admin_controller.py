from enum import Enum
import io
import csv
import json
from datetime import date, datetime
from typing import Any, Dict, List
from xml.sax.saxutils import escape

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

# --- ReportLab Imports ---
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.graphics.shapes import Drawing
from reportlab.graphics.charts.barcharts import VerticalBarChart

from app.core import config, database
from app.core.exceptions import UnknownEntityException
from app.repositories.base import Repository
from app.services.registry import ENTITIES, EntityConfig, get_entity

router = APIRouter(prefix="/admin", tags=["Administración"])


class FormatoExport(str, Enum):
    CSV = "csv"
    JSON = "json"
    XML = "xml"
    PDF = "pdf"


# ==============================================================================
#                                HELPERS
# ==============================================================================

def resolver_entidad(nombre: str) -> EntityConfig:
    entidad = get_entity(nombre)
    if entidad is None:
        raise UnknownEntityException(nombre)
    return entidad


def valor_plano(valor: Any) -> Any:
    """Valor serializable: fechas en ISO, el resto tal cual."""
    if isinstance(valor, (datetime, date)):
        return valor.isoformat()
    return valor


def iter_filas(repo: Repository, columnas: List[str]):
    """
    Recorre la tabla completa por lotes (offset/limit) en orden de id.
    Cada fila sale como dict con solo las columnas exportables.
    """
    offset = 0
    batch_size = config.EXPORT_BATCH_SIZE
    while True:
        lote = repo.get_page(offset, batch_size)
        if not lote:
            break
        for fila in lote:
            yield {c: valor_plano(getattr(fila, c)) for c in columnas}
        offset += batch_size


def adjunto(nombre: str, extension: str) -> Dict[str, str]:
    return {"Content-Disposition": f"attachment; filename=reporte_{nombre}.{extension}"}


# ==============================================================================
#                        1. ESTADÍSTICAS
# ==============================================================================
@router.get("/stats")
def obtener_stats(db: Session = Depends(database.get_db)):
    """Totales por entidad; las que tienen `active` también reportan activos."""
    stats = {}
    for entidad in ENTITIES:
        repo = Repository(db, entidad.model)
        item = {"total": repo.count()}
        if "active" in entidad.columns:
            item["activos"] = repo.count(only_active=True)
        stats[entidad.name] = item
    return stats


# ==============================================================================
#                        2. EXPORTACIÓN POR LOTES
# ==============================================================================
@router.get("/export/{nombre}/{formato}")
def exportar(nombre: str, formato: FormatoExport, db: Session = Depends(database.get_db)):
    entidad = resolver_entidad(nombre)
    repo = Repository(db, entidad.model)
    columnas = entidad.exported_columns

    if formato == FormatoExport.CSV:
        return StreamingResponse(
            iter_csv(repo, columnas), media_type="text/csv", headers=adjunto(nombre, "csv")
        )
    if formato == FormatoExport.JSON:
        return StreamingResponse(
            iter_json(repo, columnas), media_type="application/json", headers=adjunto(nombre, "json")
        )
    if formato == FormatoExport.XML:
        return StreamingResponse(
            iter_xml(entidad, repo, columnas), media_type="application/xml", headers=adjunto(nombre, "xml")
        )
    return StreamingResponse(
        construir_pdf(entidad, repo, columnas), media_type="application/pdf", headers=adjunto(nombre, "pdf")
    )


def iter_csv(repo: Repository, columnas: List[str]):
    output = io.StringIO()
    writer = csv.writer(output)

    writer.writerow(columnas)
    yield output.getvalue()
    output.seek(0); output.truncate(0)

    for fila in iter_filas(repo, columnas):
        writer.writerow([fila[c] for c in columnas])
        yield output.getvalue()
        output.seek(0); output.truncate(0)


def iter_json(repo: Repository, columnas: List[str]):
    yield "[\n"
    first = True
    for fila in iter_filas(repo, columnas):
        if not first: yield ",\n"
        else: first = False
        yield json.dumps(fila, default=str)
    yield "\n]"


def iter_xml(entidad: EntityConfig, repo: Repository, columnas: List[str]):
    yield f'<?xml version="1.0" encoding="UTF-8"?>\n<{entidad.name}List>\n'
    for fila in iter_filas(repo, columnas):
        campos = "".join(
            f"    <{c}>{escape(str(fila[c])) if fila[c] is not None else ''}</{c}>\n"
            for c in columnas if c != "id"
        )
        yield f'  <{entidad.name} id="{fila["id"]}">\n{campos}  </{entidad.name}>\n'
    yield f"</{entidad.name}List>"


def construir_pdf(entidad: EntityConfig, repo: Repository, columnas: List[str]) -> io.BytesIO:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=landscape(letter))
    doc.build(elementos_pdf(entidad, repo, columnas))
    buffer.seek(0)
    return buffer


def elementos_pdf(entidad: EntityConfig, repo: Repository, columnas: List[str]) -> list:
    """
    Contenido del PDF: título, gráfica activos/inactivos si la entidad tiene
    `active`, tabla con a lo sumo PDF_MAX_ROWS registros y nota si se recortó.
    """
    limit_rows = config.PDF_MAX_ROWS
    # Un registro de más indica que la tabla tiene más filas que el límite
    results = repo.get_page(0, limit_rows + 1)
    recortado = len(results) > limit_rows
    results = results[:limit_rows]

    elements = []
    styles = getSampleStyleSheet()

    elements.append(Paragraph(f"Reporte de {entidad.name}", styles['Title']))
    elements.append(Spacer(1, 20))

    # Gráfica activos / inactivos
    if "active" in entidad.columns:
        activos = sum(1 for fila in results if fila.active)
        data = [(activos, len(results) - activos)]
        drawing = Drawing(400, 150)
        bc = VerticalBarChart()
        bc.x = 50; bc.y = 20; bc.height = 100; bc.width = 300
        bc.data = data
        bc.strokeColor = colors.black
        bc.valueAxis.valueMin = 0
        bc.valueAxis.valueMax = max(max(data[0]), 5) + 2
        bc.categoryAxis.categoryNames = ["Activos", "Inactivos"]
        drawing.add(bc)
        elements.append(drawing)
        elements.append(Spacer(1, 20))

    # Tabla (textos largos recortados para que quepan)
    table_rows = [columnas]
    for fila in results:
        celdas = []
        for c in columnas:
            valor = valor_plano(getattr(fila, c))
            texto = "" if valor is None else str(valor)
            celdas.append(texto[:25] + ".." if len(texto) > 25 else texto)
        table_rows.append(celdas)

    t = Table(table_rows)
    t.setStyle(TableStyle([
        ('BACKGROUND', (0,0), (-1,0), colors.grey),
        ('TEXTCOLOR', (0,0), (-1,0), colors.whitesmoke),
        ('GRID', (0,0), (-1,-1), 1, colors.black),
        ('FONTSIZE', (0,0), (-1,-1), 6)
    ]))
    elements.append(t)

    if recortado:
        elements.append(Spacer(1, 10))
        elements.append(Paragraph(f"(Reporte limitado a los primeros {limit_rows} registros)", styles['Italic']))

    return elements
