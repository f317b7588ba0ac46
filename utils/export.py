"""CSV / Excel export of the simulator tables."""

from io import BytesIO

import pandas as pd

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def frame_to_csv(df):
    return df.to_csv(index=False).encode("utf-8")


def frames_to_excel(frames):
    """
    Write each DataFrame to its own sheet and return the workbook bytes.

    Args:
        frames: mapping of sheet name -> DataFrame (sheet names max 31 chars)
    """
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as writer:
        workbook = writer.book
        money_format = workbook.add_format({'num_format': '#,##0'})
        header_format = workbook.add_format({'bold': True, 'bg_color': '#f1f5f9', 'border': 1})

        for sheet_name, df in frames.items():
            df.to_excel(writer, sheet_name=sheet_name, index=False)
            worksheet = writer.sheets[sheet_name]
            for col_idx, col in enumerate(df.columns):
                worksheet.write(0, col_idx, col, header_format)
                if pd.api.types.is_numeric_dtype(df[col]):
                    worksheet.set_column(col_idx, col_idx, 20, money_format)
                else:
                    width = max(len(str(col)), *(len(str(v)) for v in df[col])) if len(df) else len(str(col))
                    worksheet.set_column(col_idx, col_idx, min(width + 2, 60))
    bio.seek(0)
    return bio.read()
