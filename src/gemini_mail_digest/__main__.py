import sys

from gemini_mail_digest.entrypoints import main

sys.exit(main())
