# core/data_manager.py

"""
Reads and writes the roster as a comma-separated text file.

The file format is a literal header line `StudentId,Name,Age` followed by one
`<student_id>,<name>,<age>` line per student. Values are written as-is, with no quoting or
escaping: a student ID or name containing a comma will not load back correctly.

Persistence is best-effort. File system errors are logged and reported through the return
value rather than raised:
- `save_students_to_file()` returns a failed `Response`.
- `load_students_from_file()` returns the students read before the failure (possibly none).
"""

from __future__ import annotations

import logging
import re

from core.errors import ErrorCode, ValidationError
from core.response import Response
from models.student import Student

logger = logging.getLogger(__name__)

HEADER = "StudentId,Name,Age"
FIELD_SEPARATOR = ","
ENCODING = "utf-8"
AGE_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


class DataManager:

    def save_students_to_file(self, students: list[Student], file_path: str) -> Response:
        """
        Writes `students` to `file_path`, replacing any existing file.

        Args:
            students (list[Student]): The students to write, in output order.
            file_path (str): The target file path.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every line was written.
                    - False if the file could not be opened or written.
                - detail (str | None): A human-readable description of the outcome.
                - error (ErrorCode | None):
                    - `ErrorCode.IO_FAILURE` if an OSError was raised.
                - data (dict): Payload with the following keys:
                    - On success:
                        - "count" (int): The number of student records written.

        Notes:
            - This method never raises for file system errors.
        """
        try:
            with open(file_path, "w", encoding=ENCODING, newline="") as f:
                f.write(HEADER + "\n")
                for student in students:
                    f.write(self.format_line(student) + "\n")

        except OSError as e:
            logger.error("Failed to save students to %s: %s", file_path, e)
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.IO_FAILURE,
            )

        else:
            logger.info("Saved %d students to %s", len(students), file_path)
            return Response.succeed(
                detail="Student data saved to file.",
                data={"count": len(students)},
            )

    def load_students_from_file(self, file_path: str) -> list[Student]:
        """
        Reads students from `file_path`.

        Args:
            file_path (str): The source file path.

        Returns:
            The students read from the file, in file order.

        Notes:
            - The first line is treated as the header and discarded without being checked.
            - Lines without exactly three fields, or whose age is not an integer, are skipped.
            - If the file cannot be read, or a line holds values the `Student` constructor rejects,
              the error is logged and the students read up to that point are returned.
        """
        students: list[Student] = []

        try:
            with open(file_path, "r", encoding=ENCODING, newline="") as f:
                f.readline()

                for line_number, line in enumerate(f, start=2):
                    fields = self.parse_line(line)
                    if fields is None:
                        logger.debug("Skipping malformed line %d: %r", line_number, line)
                        continue

                    student_id, name, age = fields
                    students.append(Student(student_id, name, age))

        except OSError as e:
            logger.error("Failed to read students from %s: %s", file_path, e)

        except UnicodeDecodeError as e:
            logger.error("Failed to decode %s as %s: %s", file_path, ENCODING, e)

        except ValidationError as e:
            logger.error("Invalid student record in %s: %s", file_path, e)

        else:
            logger.info("Loaded %d students from %s", len(students), file_path)

        return students

    # === helper methods ===

    @staticmethod
    def format_line(student: Student) -> str:
        return FIELD_SEPARATOR.join(
            [student.student_id, student.name, str(student.age)]
        )

    @staticmethod
    def parse_line(line: str) -> tuple[str, str, int] | None:
        """
        Splits a data line into `(student_id, name, age)`.

        Returns:
            The parsed fields, or None if the line does not have exactly three fields or the
            age is not an integer. Only ASCII digits with an optional sign and
            surrounding whitespace count as an integer.
        """
        parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
        if len(parts) != 3:
            return None

        if not AGE_PATTERN.fullmatch(parts[2]):
            return None

        return parts[0], parts[1], int(parts[2])
