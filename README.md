# gradepredicate

Service layer for student records and for a student's graduation predicate.
The records are academic results, achievements, organisational activities
and courses.

The services keep no data of their own. When you build a service, you give
it repository objects, and it reads and writes only through them. You can
wire the services to any store, and you can test them with in-memory fakes.

## Installation

```
pip install gradepredicate
```

To install the test dependencies as well:

```
pip install "gradepredicate[test]"
```

## Records

`gradepredicate.records` holds plain dataclasses:

- **Domain records:** `User`, `Academic`, `Achievement`, `Activity`,
  `Course`, `Thesis` and `Predicate`.
- **Request payloads:** `CreateAcademicRequest`, `UpdateAcademicRequest`,
  and the matching create and update requests for achievements, activities
  and courses.
- **Response payloads:** `AcademicResponse`, `AchievementResponse`,
  `ActivityResponse`, `CourseResponse` and `FuzzyResult`.

The module also defines:

- the `Level` enum, with the values `internasional`, `nasional` and
  `internal`;
- the `NotFoundError` exception, a subclass of `LookupError`.

## Record services

| Service | Constructor | Methods |
| --- | --- | --- |
| `gradepredicate.academic.AcademicService` | `(repo, user_repo, predicate_repo)` | `create_academic`, `get_academic_by_id`, `get_academics_by_user_id`, `get_all_academics`, `update_academic`, `delete_academic` |
| `gradepredicate.achievement.AchievementService` | `(repo)` | `create_achievement`, `get_achievement_by_id`, `get_achievements_by_user_id`, `get_all_achievements`, `update_achievement`, `delete_achievement` |
| `gradepredicate.activity.ActivityService` | `(repo)` | `create_activity`, `get_activity_by_id`, `get_activities_by_user_id`, `get_all_activities`, `update_activity`, `delete_activity` |
| `gradepredicate.course.CourseService` | `(repo)` | `create_course`, `get_course_by_id`, `get_courses`, `update_course`, `delete_course`, `import_courses` |

### What the services expect of a repository

- A repository returns `None` for a record it does not have.
- A repository raises an exception when it fails. The services let that
  exception pass through unchanged.
- The services call repository methods with snake_case names that mirror
  their own. For example, `repo.get_academic_by_id(id)`,
  `repo.create_course(model)` and `user_repo.get_user_by_id(id)`.
- A create method may set `id` on the model it is given. The response
  carries that `id`.

### What the services do

- Create and update set `created_at` and `updated_at` from `datetime.now()`.
- A lookup that finds nothing raises `NotFoundError`. The messages are:
  - `"user not found"`
  - `"academic record not found"`
  - `"achievement not found"`
  - `"activity not found"`
  - `"course not found"`
- Listing methods return an empty list when there are no records.
- `AcademicService.create_academic` checks that the user exists before it
  creates the record.
- `AcademicService.update_academic` checks that the record's user still
  exists.
- `CourseService.delete_course` checks that the course exists before it
  deletes it. The other delete methods pass the id straight to the
  repository.
- `CourseService.import_courses(reqs)` creates the courses in order. It
  stops at the first repository error.

```python
from gradepredicate.academic import AcademicService
from gradepredicate.records import CreateAcademicRequest

service = AcademicService(academic_repo, user_repo, predicate_repo)
created = service.create_academic(
    CreateAcademicRequest(
        user_id=1,
        ipk=3.5,
        repeated_courses=0,
        semester=1,
        year=2023,
        predicate_id=1,
    )
)
print(created.id, created.ipk)
```

## Graduation predicate

`gradepredicate.fuzzy.FuzzyService` works out a student's graduation
predicate. You build it with these arguments:

- `academic_repo`
- `thesis_repo`
- `achievement_repo`
- `activity_repo`
- `predicate_repo`
- `infer`, a callable

`calculate_fuzzy(student_id)` runs these steps:

1. It takes the student's first academic record. If there is none, or the
   lookup fails, it raises `FuzzyError`.
2. It takes the first thesis. If there is no thesis, it uses an empty
   `Thesis` with level `""`.
3. It collects the achievements and the activities. If any of the thesis,
   achievement or activity lookups fails, it logs a warning and treats the
   data as empty.
4. It calls `infer` with these arguments, in this order:
   1. IPK
   2. semester
   3. repeated courses
   4. best achievement rank (`0` if there is none)
   5. best achievement level (`""` if there is none)
   6. thesis impact
   7. thesis level
   8. activity count

   `infer` returns a predicate name.
5. It looks up the predicate by name with `predicate_repo.get_by_name`. It
   stores the predicate's id on the academic record with
   `academic_repo.update_academic`. If the lookup fails, the lookup finds
   nothing, or the update fails, it raises `FuzzyError`.
6. It returns a `FuzzyResult` with these fields:
   - `student_id`
   - `ipk`
   - `semester`
   - `repeated_courses`
   - `achievement_level`
   - `achievement_rank`
   - `thesis_level`
   - `thesis_impact`
   - `activity_count`
   - `predicate`

```python
from gradepredicate.fuzzy import FuzzyService

fuzzy = FuzzyService(
    academic_repo, thesis_repo, achievement_repo, activity_repo, predicate_repo,
    infer=my_inference,
)
result = fuzzy.calculate_fuzzy(student_id=1)
print(result.predicate)
```

The module also has three helpers:

- `best_achievement(achievements)` picks the achievement with the highest
  level priority. Among achievements of the same level, the lowest rank
  wins. It returns `None` for an empty list.
- `level_priority(level)` gives `internasional` 3, `nasional` 2, `internal`
  1, and anything else 0.
- `thesis_impact(thesis)` gives `internasional` 5.0, `nasional` 3.0, and
  anything else 1.0.

## What this package does not do

- It has no fuzzy inference engine of its own. The membership functions and
  rules that turn a student's data into a predicate name are the `infer`
  callable you supply.
- It has no storage. Repositories for a database or any other store are up
  to you.
- It has no HTTP API and no command-line tool.