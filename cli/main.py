# cli/main.py

"""
Demonstration driver for the student roster.

Runs a fixed sequence against fresh managers: add three students and two scores each, query
the roster by age, report every student's scores, average and grade, show the top student,
then save the roster to disk and load it back.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.config import settings
from core.data_manager import DataManager
from core.errors import RosterError
from core.logging_config import setup_logging
from models.score import Score
from models.score_manager import ScoreManager
from models.student import Student
from models.student_manager import StudentManager

DEMO_STUDENTS = [
    ("2021001", "张三", 20),
    ("2021002", "李四", 19),
    ("2021003", "王五", 21),
]

DEMO_SCORES = [
    ("2021001", "数学", 95.5),
    ("2021001", "英语", 87.0),
    ("2021002", "数学", 78.5),
    ("2021002", "英语", 85.5),
    ("2021003", "数学", 88.0),
    ("2021003", "英语", 92.0),
]


def run_demo(data_file: str, wait_for_exit: bool = True) -> None:
    """
    Runs the demonstration sequence and prints each step to the console.

    Args:
        data_file (str): The path the roster is saved to and loaded back from.
        wait_for_exit (bool): If True, waits for the user to press Enter before returning.

    Notes:
        - A `RosterError` raised by any step ends the sequence early; the error is printed and the exit prompt still runs.
        - Persistence failures do not end the sequence; they are printed and the load step shows whatever could be read.
    """
    print(formatters.format_banner_text("学生成绩管理系统"))

    student_manager = StudentManager()
    score_manager = ScoreManager()
    data_manager = DataManager()

    try:
        print(formatters.format_section_heading(1, "添加学生信息"))
        for student_id, name, age in DEMO_STUDENTS:
            student_manager.add(Student(student_id, name, age))
        print("学生信息添加完成")

        print(formatters.format_section_heading(2, "添加成绩信息"))
        for student_id, subject, points in DEMO_SCORES:
            score_manager.add_score(student_id, Score(subject, points))
        print("成绩信息添加完成")

        print(formatters.format_section_heading(3, "查找年龄在19-20岁的学生"))
        print(
            model_formatters.format_student_list(
                student_manager.get_students_by_age(19, 20)
            )
        )

        print(formatters.format_section_heading(4, "学生成绩统计"))
        all_students = student_manager.get_all()
        for student in all_students:
            print(model_formatters.format_student_report(student, score_manager))

        print(formatters.format_section_heading(5, "平均分最高的学生"))
        for student_id, average in score_manager.get_top_students(1):
            student = student_manager.find_by_id(student_id)
            if student is not None:
                print(model_formatters.format_top_student(student, average))

        print(formatters.format_section_heading(6, "数据持久化演示"))
        save_response = data_manager.save_students_to_file(all_students, data_file)
        if save_response.success:
            print("学生数据已保存到文件")
        else:
            helpers.display_response_failure(save_response)

        loaded_students = data_manager.load_students_from_file(data_file)
        print("从文件加载的学生信息:")
        print(model_formatters.format_student_list(loaded_students))

    except RosterError as e:
        helpers.display_error(e)

    if wait_for_exit:
        helpers.prompt_exit("程序执行完毕，按回车键退出...")
    else:
        print("\n程序执行完毕")


def main() -> None:
    setup_logging(settings.log_level, settings.log_file)
    run_demo(settings.data_file, settings.wait_for_exit)


if __name__ == "__main__":
    main()
