#!/usr/bin/env python3
"""
Results Handler Module
Handles saving census reports to json, csv or txt files.
"""

import os
import csv
import json
import time
import logging
from typing import Any, Dict, List, Optional
from name_census.config import OUTPUT_FORMATS
from name_census.core.models import Report

logger = logging.getLogger(__name__)

CSV_FIELDS = ['section', 'rank', 'name', 'count', 'first', 'last']

class ResultsHandler:
    """Handles saving a census Report (CLI-only, no prompts)."""
    
    def save_report(self, report: Report, output_file: str, *, output_format: Optional[str] = None,
                    overwrite: bool = False) -> Optional[str]:
        """Save the report, inferring the format from the extension when not given.
        
        Returns the path actually written (a suffixed name when the target
        exists and overwrite is False), or None on failure.
        """
        if not output_file:
            return None
        
        fmt = (output_format or self._infer_format_from_path(output_file)).lower()
        if fmt not in OUTPUT_FORMATS:
            logger.error(f"Unsupported output format: {fmt}")
            return None
        
        final_filepath = output_file
        if os.path.exists(output_file) and not overwrite:
            try:
                final_filepath = self._generate_new_filename(output_file)
                logger.warning(f"{output_file} exists, saving to {final_filepath} instead")
            except ValueError as e:
                logger.error(f"Error generating new filename: {e}")
                return None
        
        try:
            os.makedirs(os.path.dirname(final_filepath) if os.path.dirname(final_filepath) else '.', exist_ok=True)
            
            if fmt == 'json':
                self._write_json(final_filepath, report)
            elif fmt == 'csv':
                self._write_csv(final_filepath, report)
            else:
                self._write_txt(final_filepath, report)
            
            logger.info(f"Report saved to {final_filepath}")
            return final_filepath
            
        except PermissionError:
            logger.error(f"Permission denied writing to {final_filepath}")
            return None
        except OSError as e:
            logger.error(f"Error saving report to {final_filepath}: {e}")
            return None
    
    def _infer_format_from_path(self, path: str) -> str:
        ext = os.path.splitext(path)[1].lower()
        if ext == '.json':
            return 'json'
        if ext == '.csv':
            return 'csv'
        if ext in ('.txt', '.log'):
            return 'txt'
        return 'json'
    
    def _write_json(self, filepath: str, report: Report):
        data_to_save = {
            'timestamp': time.time(),
            **report.to_dict(),
        }
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data_to_save, f, indent=2, ensure_ascii=False)
    
    def report_rows(self, report: Report) -> List[Dict[str, Any]]:
        """Flatten a report into csv rows keyed by CSV_FIELDS."""
        rows = [
            {'section': 'unique', 'name': 'first', 'count': report.unique_first_count},
            {'section': 'unique', 'name': 'last', 'count': report.unique_last_count},
            {'section': 'unique', 'name': 'full', 'count': report.unique_full_count},
        ]
        for section, entries in (('top_first', report.top_first), ('top_last', report.top_last)):
            for i, entry in enumerate(entries, 1):
                rows.append({'section': section, 'rank': i, 'name': entry.name, 'count': entry.count})
        for i, pair in enumerate(report.selected_pairs, 1):
            rows.append({'section': 'pair', 'rank': i, 'first': pair.first, 'last': pair.last})
        return rows
    
    def _write_csv(self, filepath: str, report: Report):
        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDS, restval='')
            writer.writeheader()
            for row in self.report_rows(report):
                writer.writerow(row)
    
    def _write_txt(self, filepath: str, report: Report):
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(f"Unique first names: {report.unique_first_count}\n")
            f.write(f"Unique last names: {report.unique_last_count}\n")
            f.write(f"Unique full names: {report.unique_full_count}\n")
            f.write("Top first names:\n")
            for entry in report.top_first:
                f.write(f"  {entry.name} | {entry.count}\n")
            f.write("Top last names:\n")
            for entry in report.top_last:
                f.write(f"  {entry.name} | {entry.count}\n")
            f.write(f"Selected names ({len(report.selected_pairs)}):\n")
            for pair in report.selected_pairs:
                f.write(f"  {pair.last}, {pair.first}\n")
    
    def _generate_new_filename(self, original_filepath: str) -> str:
        """Generate a new filename by adding a number suffix."""
        base_path, ext = os.path.splitext(original_filepath)
        counter = 1
        
        while True:
            new_path = f"{base_path}_{counter}{ext}"
            if not os.path.exists(new_path):
                return new_path
            counter += 1
            
            if counter > 1000:
                raise ValueError("Could not generate unique filename after 1000 attempts")
