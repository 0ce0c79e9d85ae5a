from .table_export import ExportResult, export_table_to_csv, table_to_csv_bytes, write_emit_plan

__all__ = ["ExportResult", "export_table_to_csv", "table_to_csv_bytes", "write_emit_plan"]
