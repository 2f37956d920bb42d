"""Bootstrap a Next.js app with Prisma, NextAuth, shadcn/ui and Tailwind."""

__version__ = "0.1.0"
