"""
Command Line Interface Module

Uses the built-in `cmd` module for synchronous input parsing and runs each
async controller call to completion on one event loop owned by the CLI (the
same loop the logger was initialized on).

Commands:
- cvs / addcv / delcv          list, create, delete CVs
- review / match / letter      run the analysis workflows
- profile                      show or save the profile
- history / export / clear     past results, CSV export, wipe all data
- quit
"""

import asyncio
import cmd
import shlex

from models import CareerAssistantError


class CLI(cmd.Cmd):
    intro = 'Career assistant. Type help or ? to list commands.\n'
    prompt = '(cv) '

    def __init__(self, controller, loop: asyncio.AbstractEventLoop = None, stdout=None):
        super().__init__(stdout=stdout)
        self.controller = controller
        self.loop = loop or asyncio.new_event_loop()

    def _run(self, coro):
        return self.loop.run_until_complete(coro)

    def _print(self, text: str = ""):
        self.stdout.write(text + "\n")

    def onecmd(self, line):
        """Report domain errors instead of leaving the shell."""
        try:
            return super().onecmd(line)
        except CareerAssistantError as e:
            self._print(f"Error: {e}")
        except (ValueError, OSError) as e:
            self._print(f"Error: {e}")
        return False

    def emptyline(self):
        return False

    # -------------------------------------------------------------------------
    # CVs
    # -------------------------------------------------------------------------

    def do_cvs(self, arg):
        """List saved CVs."""
        cvs = self.controller.list_cvs()
        if not cvs:
            self._print("No CVs available.")
            return
        for cv in cvs:
            self._print(f"{cv.id}  {cv.name}  (updated {cv.updated_at})")

    def do_addcv(self, arg):
        """
        Save a CV from free text.
        Usage: addcv "Name" "CV text"
        """
        parts = shlex.split(arg)
        if not parts:
            self._print('Usage: addcv "Name" "CV text"')
            return
        cv = self.controller.save_cv(parts[0], raw_text=parts[1] if len(parts) > 1 else "")
        self._print(f"Saved CV {cv.id}")

    def do_delcv(self, arg):
        """Delete a CV. Usage: delcv <cv_id>"""
        removed = self.controller.delete_cv(arg.strip())
        self._print("Deleted." if removed else "No such CV.")

    # -------------------------------------------------------------------------
    # Analyses
    # -------------------------------------------------------------------------

    def do_review(self, arg):
        """
        Review a saved CV or an uploaded file.
        Usage: review <cv_id>   |   review --file path/to/cv.pdf
        """
        parts = shlex.split(arg)
        if len(parts) >= 2 and parts[0] == "--file":
            review = self._run(self.controller.review_cv(document_path=parts[1]))
        else:
            review = self._run(self.controller.review_cv(cv_id=parts[0] if parts else None))

        self._print(f"Overall score: {review.score}%")
        self._print("Strengths:")
        for item in review.feedback.strengths:
            self._print(f"  + {item}")
        self._print("Areas for improvement:")
        for item in review.feedback.improvements:
            self._print(f"  - {item}")
        self._print(f"Suggestions: {review.feedback.suggestions}")
        self.controller.review_agent.reset()

    def do_match(self, arg):
        """
        Match a CV to a job description.
        Usage: match <cv_id> "job description"
        """
        parts = shlex.split(arg)
        match = self._run(self.controller.match_job(
            parts[0] if parts else "", parts[1] if len(parts) > 1 else ""
        ))
        self._print(f"Match score: {match.match_score}%")
        self._print(f"Missing skills: {', '.join(match.missing_skills) or 'none'}")
        self._print(f"Suggestions: {match.suggestions}")
        self.controller.match_agent.reset()

    def do_letter(self, arg):
        """
        Generate and save a cover letter.
        Usage: letter "Job title" "Company" "job description" [cv_id]
        """
        parts = shlex.split(arg)
        fields = dict(zip(("job_title", "company_name", "job_description", "cv_id"), parts))
        draft = self._run(self.controller.generate_cover_letter(**fields))
        saved = self._run(self.controller.save_cover_letter(draft))
        self._print(saved.content)
        self._print(f"\nSaved cover letter {saved.id}")
        self.controller.cover_letter_agent.reset()

    # -------------------------------------------------------------------------
    # Profile & history
    # -------------------------------------------------------------------------

    def do_profile(self, arg):
        """
        Show the profile, or save it.
        Usage: profile   |   profile "Name" email@example.com [phone]
        """
        parts = shlex.split(arg)
        if not parts:
            profile = self._run(self.controller.get_profile())
            if profile is None:
                self._print("No profile yet.")
            else:
                self._print(f"{profile.name} <{profile.email}> {profile.phone or ''}".rstrip())
            return
        profile = self._run(self.controller.save_profile(
            parts[0], parts[1] if len(parts) > 1 else "", parts[2] if len(parts) > 2 else None
        ))
        self._print(f"Profile saved for {profile.name}")

    def do_history(self, arg):
        """Show past reviews, job matches and cover letters."""
        for review in self.controller.list_reviews():
            self._print(f"review  {review.created_at}  cv={review.cv_id}  score={review.score}")
        for match in self.controller.list_job_matches():
            self._print(f"match   {match.created_at}  cv={match.cv_id}  score={match.match_score}")
        for letter in self.controller.list_cover_letters():
            self._print(f"letter  {letter.updated_at}  {letter.job_title} @ {letter.company_name}")

    def do_export(self, arg):
        """Export a collection to CSV. Usage: export cvs|cv_reviews|job_matches|cover_letters"""
        path = self.controller.export_collection(arg.strip())
        self._print(f"Exported to {path}")

    def do_clear(self, arg):
        """Delete all stored data."""
        self._run(self.controller.clear_all_data())
        self._print("All data cleared.")

    def do_quit(self, arg):
        """Exit the application."""
        self._print("Goodbye!")
        return True

    def default(self, line):
        self._print(f"Unknown command: {line}. Type 'help' or '?' for available commands.")
