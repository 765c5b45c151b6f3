#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Warden environment list parser

Recovers (name, path) records from the colored text printed by `warden status`:

    Found the following running environments:
        shop a magento2 project
           Project Directory: /home/dev/shop
           Project URL: https://shop.test

Each project block is a name line followed by a directory line. Anything that
does not fit that order is skipped rather than attached to the wrong project.
"""

import re
import logging
from typing import List, Optional

from ..core.types import EnvironmentRecord


class EnvironmentListParser:
    """
    Line-oriented parser for `warden status` output

    Keeps a single pending project name: a name line sets it, a directory
    line consumes it. A second name line overwrites the first.
    """

    # Regex patterns for parsing
    PATTERNS = {
        'ansi': r'\x1b\[[0-9;]*m',
        'banner': r'no running environments|found the following',
        # "    shop a magento2 project"
        'project_name': r'^\s*(\w+)\s+a\s+\w+\s+project\s*$',
        # "       Project Directory: /home/dev/shop"
        'project_directory': r'^\s*Project Directory:\s*(.+)$',
        'project_url': r'Project URL:',
    }

    def __init__(self):
        self.logger = logging.getLogger('warden_mcp.parsers.environment')
        self._ansi = re.compile(self.PATTERNS['ansi'])
        self._banner = re.compile(self.PATTERNS['banner'], re.IGNORECASE)
        self._name = re.compile(self.PATTERNS['project_name'])
        self._directory = re.compile(self.PATTERNS['project_directory'])
        self._url = re.compile(self.PATTERNS['project_url'])

    def strip_ansi(self, line: str) -> str:
        """Remove color escape sequences"""
        return self._ansi.sub('', line)

    def parse(self, raw_text: str) -> List[EnvironmentRecord]:
        """
        Parse raw `warden status` output

        Args:
            raw_text: Full stdout of the status command

        Returns:
            Records in order of appearance
        """
        records: List[EnvironmentRecord] = []
        pending_name: Optional[str] = None

        for line in raw_text.splitlines():
            clean = self.strip_ansi(line).strip()

            if not clean or self._banner.search(clean):
                continue

            if self._url.search(clean):
                continue

            name_match = self._name.match(clean)
            if name_match:
                if pending_name is not None:
                    self.logger.debug(f"Project '{pending_name}' has no directory line, skipped")
                pending_name = name_match.group(1)
                continue

            directory_match = self._directory.match(clean)
            if directory_match:
                if pending_name is None:
                    self.logger.debug(f"Directory line without project name skipped: {clean}")
                    continue
                records.append(EnvironmentRecord(
                    name=pending_name,
                    path=directory_match.group(1).strip(),
                    raw_line=line,
                ))
                pending_name = None

        return records


def parse_environment_list(raw_text: str) -> List[EnvironmentRecord]:
    """Parse `warden status` output into environment records"""
    return EnvironmentListParser().parse(raw_text)
